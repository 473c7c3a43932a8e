from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Optional
from uuid import UUID


class CamelModel(BaseModel):
    """JSONのキーはcamelCase、Python側はsnake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserToCreateRequest(CamelModel):
    # 必須チェックはユースケース層で行う（422をフィールド単位で返すため）
    login: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserToUpdateRequest(CamelModel):
    login: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PatchOperationRequest(CamelModel):
    op: str
    path: str
    value: Optional[Any] = None
    from_: Optional[str] = Field(default=None, alias="from")


class UserResponse(CamelModel):
    id: UUID
    login: str
    full_name: str
    games_played: int
    current_game_id: Optional[UUID] = None


class HealthResponse(BaseModel):
    status: str
    version: str
