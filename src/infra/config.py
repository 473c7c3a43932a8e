from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import json


REPOSITORY_BACKENDS = ("tortoise", "memory")


class Settings(BaseSettings):
    # Database
    database_url: str = Field(default="sqlite://data/users.db")
    generate_schemas: bool = Field(default=True)
    repository_backend: str = Field(default="tortoise")
    
    # Environment
    environment: str = Field(default="development")
    log_file: Optional[str] = Field(default=None)
    
    # HTTP
    api_prefix: str = Field(default="/api")
    cors_origins: List[str] = Field(default=["http://localhost:5173"])
    
    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v
    
    @field_validator("repository_backend")
    @classmethod
    def validate_repository_backend(cls, v):
        v = v.lower()
        if v not in REPOSITORY_BACKENDS:
            raise ValueError(f"REPOSITORY_BACKEND must be one of {', '.join(REPOSITORY_BACKENDS)}")
        return v
    
    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v):
        if not v.startswith("/") or v.endswith("/"):
            raise ValueError("API_PREFIX must start with '/' and must not end with '/'")
        return v
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )
