from dataclasses import dataclass
from typing import Optional
from uuid import UUID

DEFAULT_FIRST_NAME = "John"
DEFAULT_LAST_NAME = "Doe"

@dataclass
class UserToCreateDTO:
    """
    ユーザー作成用DTO
    """
    login: Optional[str] = None
    first_name: Optional[str] = DEFAULT_FIRST_NAME
    last_name: Optional[str] = DEFAULT_LAST_NAME

@dataclass
class UserToUpdateDTO:
    """
    ユーザー更新用DTO（PUT/PATCH）

    デフォルト構築時は全フィールドが未設定(None)。
    """
    login: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

@dataclass
class UserDTO:
    """
    クライアントへ返すユーザー情報DTO
    """
    id: UUID
    login: str
    full_name: str
    games_played: int
    current_game_id: Optional[UUID]
