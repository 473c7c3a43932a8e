"""
ユーザーのエンティティ <-> DTO 変換
"""
from uuid import UUID

from src.domain.entity.user_entity import UserEntity
from src.port.dto.user_dto import (
    DEFAULT_FIRST_NAME, DEFAULT_LAST_NAME, UserDTO, UserToCreateDTO, UserToUpdateDTO
)


class UserMapper:
    """UserEntity と各DTOの相互変換"""

    def to_user_dto(self, entity: UserEntity) -> UserDTO:
        return UserDTO(
            id=entity.id,
            login=entity.login,
            full_name=f"{entity.last_name} {entity.first_name}",
            games_played=entity.games_played,
            current_game_id=entity.current_game_id,
        )

    def create_dto_to_entity(self, dto: UserToCreateDTO) -> UserEntity:
        return UserEntity(
            id=None,
            login=dto.login,
            first_name=dto.first_name if dto.first_name is not None else DEFAULT_FIRST_NAME,
            last_name=dto.last_name if dto.last_name is not None else DEFAULT_LAST_NAME,
        )

    def update_dto_to_entity(self, dto: UserToUpdateDTO, user_id: UUID) -> UserEntity:
        """IDとDTOのフィールドのみを持つ新しいエンティティを生成"""
        return UserEntity(
            id=user_id,
            login=dto.login,
            first_name=dto.first_name,
            last_name=dto.last_name,
        )

    def entity_to_update_dto(self, entity: UserEntity) -> UserToUpdateDTO:
        return UserToUpdateDTO(
            login=entity.login,
            first_name=entity.first_name,
            last_name=entity.last_name,
        )
