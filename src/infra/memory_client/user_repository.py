"""
In-memory UserRepository implementation

Used with REPOSITORY_BACKEND=memory and by the API tests. Entities are copied
on the way in and out so callers never share state with the store.
"""
from dataclasses import replace
from typing import Dict, Optional, Tuple
from uuid import UUID, uuid4

from ...domain.entity.page import Page
from ...domain.entity.user_entity import UserEntity
from ...port.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """dict を用いた UserRepository の実装"""

    def __init__(self):
        self._users: Dict[UUID, UserEntity] = {}

    async def find_by_id(self, user_id: UUID) -> Optional[UserEntity]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def insert(self, user: UserEntity) -> UserEntity:
        stored = replace(user, id=user.id or uuid4())
        self._users[stored.id] = stored
        return replace(stored)

    async def update(self, user: UserEntity) -> None:
        if user.id in self._users:
            self._users[user.id] = replace(user)

    async def update_or_insert(self, user: UserEntity) -> Tuple[UserEntity, bool]:
        is_inserted = user.id not in self._users
        self._users[user.id] = replace(user)
        return replace(user), is_inserted

    async def delete(self, user_id: UUID) -> None:
        self._users.pop(user_id, None)

    async def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        ordered = sorted(self._users.values(), key=lambda u: (u.login, str(u.id)))
        start = (page_number - 1) * page_size
        return Page(
            items=[replace(u) for u in ordered[start:start + page_size]],
            total_count=len(ordered),
            current_page=page_number,
            page_size=page_size
        )
