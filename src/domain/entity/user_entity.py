from dataclasses import dataclass
from typing import Optional
from uuid import UUID

@dataclass
class UserEntity:
    """
    ユーザーのビジネスドメインモデル
    """
    id: Optional[UUID]
    login: str
    first_name: str
    last_name: str
    games_played: int = 0
    current_game_id: Optional[UUID] = None
