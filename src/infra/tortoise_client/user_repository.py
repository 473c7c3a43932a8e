from uuid import UUID, uuid4
from typing import Any, Dict, Optional, Tuple

from ...port.user_repository import UserRepository
from ...domain.entity.page import Page
from ...domain.entity.user_entity import UserEntity
from .models import User


class TortoiseUserRepository(UserRepository):
    """
    Tortoise ORM を用いた UserRepository の実装
    """

    @staticmethod
    def _to_entity(user: User) -> UserEntity:
        return UserEntity(
            id=user.id,
            login=user.login,
            first_name=user.first_name,
            last_name=user.last_name,
            games_played=user.games_played,
            current_game_id=user.current_game_id
        )

    @staticmethod
    def _to_fields(user: UserEntity) -> Dict[str, Any]:
        return {
            "login": user.login,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "games_played": user.games_played,
            "current_game_id": user.current_game_id,
        }

    async def find_by_id(self, user_id: UUID) -> Optional[UserEntity]:
        """IDでユーザーを取得"""
        user = await User.filter(id=user_id).first()
        if not user:
            return None
        return self._to_entity(user)

    async def insert(self, user: UserEntity) -> UserEntity:
        user_id = user.id or uuid4()
        created = await User.create(id=user_id, **self._to_fields(user))
        return self._to_entity(created)

    async def update(self, user: UserEntity) -> None:
        await User.filter(id=user.id).update(**self._to_fields(user))

    async def update_or_insert(self, user: UserEntity) -> Tuple[UserEntity, bool]:
        stored, created = await User.update_or_create(
            defaults=self._to_fields(user),
            id=user.id
        )
        return self._to_entity(stored), created

    async def delete(self, user_id: UUID) -> None:
        await User.filter(id=user_id).delete()

    async def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        """ログイン名順にページを取得"""
        total_count = await User.all().count()
        users = await User.all().order_by("login", "id") \
            .offset((page_number - 1) * page_size) \
            .limit(page_size)
        return Page(
            items=[self._to_entity(user) for user in users],
            total_count=total_count,
            current_page=page_number,
            page_size=page_size
        )
