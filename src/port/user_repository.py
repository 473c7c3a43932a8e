from typing import Protocol, Optional, Tuple
from uuid import UUID

from ..domain.entity.page import Page
from ..domain.entity.user_entity import UserEntity

class UserRepository(Protocol):
    """
    ユーザーデータの永続化インターフェース。

    実装はエンティティのコピーを返し、呼び出し側が内部状態を保持しないこと。
    """

    async def find_by_id(self, user_id: UUID) -> Optional[UserEntity]:
        ...

    async def insert(self, user: UserEntity) -> UserEntity:
        ...

    async def update(self, user: UserEntity) -> None:
        ...

    async def update_or_insert(self, user: UserEntity) -> Tuple[UserEntity, bool]:
        """更新または挿入し、挿入が行われたかどうかを返す"""
        ...

    async def delete(self, user_id: UUID) -> None:
        ...

    async def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        """ログイン名順に並べたページを取得"""
        ...
