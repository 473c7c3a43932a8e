"""
ユーザー管理サービス - ユースケース層

RESTエンドポイントごとに1メソッド。書き込み系はリポジトリに触れる前にDTOを検証し、
1リクエストあたりの更新系リポジトリ呼び出しは高々1回。
"""
import logging
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entity.user_entity import UserEntity
from src.domain.exception.user_exceptions import (
    MalformedUserRequestError, UserNotFoundError, UserValidationError
)
from src.port.dto.pagination_dto import PaginationMetadata
from src.port.dto.patch_dto import PatchOperation
from src.port.dto.user_dto import UserDTO, UserToCreateDTO, UserToUpdateDTO
from src.port.link_generator import LinkGenerator
from src.port.user_repository import UserRepository
from src.usecase.user_management.pagination import PageRequest, build_pagination_metadata
from src.usecase.user_management.patch_document import apply_patch
from src.usecase.user_management.user_mapper import UserMapper
from src.usecase.user_management.user_validation import (
    validate_user_to_create, validate_user_to_update
)

EMPTY_USER_ID = UUID(int=0)
LIST_USERS_ENDPOINT = "get_users"

logger = logging.getLogger("usecase.users")


class UserService:
    """ユーザー管理サービス"""

    def __init__(self, user_repository: UserRepository, mapper: UserMapper):
        self._user_repository = user_repository
        self._mapper = mapper

    async def get_user(self, user_id: UUID) -> UserDTO:
        """IDでユーザーを取得"""
        user = await self._user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return self._mapper.to_user_dto(user)

    async def create_user(self, dto: Optional[UserToCreateDTO]) -> UserEntity:
        """ユーザーを作成し、採番済みIDを持つエンティティを返す"""
        if dto is None:
            raise MalformedUserRequestError("User document is required")

        errors = validate_user_to_create(dto)
        if errors:
            logger.warning("User creation rejected", extra={"errors": errors})
            raise UserValidationError(errors)

        user = self._mapper.create_dto_to_entity(dto)
        created = await self._user_repository.insert(user)
        logger.info("User created", extra={"user_id": str(created.id)})
        return created

    async def upsert_user(self, user_id: UUID,
                          dto: Optional[UserToUpdateDTO]) -> Tuple[UUID, bool]:
        """
        指定IDのユーザーを置き換える。存在しなければ新規作成する。

        戻り値: (ユーザーID, 新規作成されたか)
        """
        if dto is None:
            raise MalformedUserRequestError("User document is required")
        if user_id == EMPTY_USER_ID:
            raise MalformedUserRequestError("User ID must not be empty")

        errors = validate_user_to_update(dto)
        if errors:
            logger.warning(
                "User update rejected",
                extra={"user_id": str(user_id), "errors": errors}
            )
            raise UserValidationError(errors)

        user = self._mapper.update_dto_to_entity(dto, user_id)
        stored, is_inserted = await self._user_repository.update_or_insert(user)
        logger.info(
            "User inserted" if is_inserted else "User replaced",
            extra={"user_id": str(stored.id)}
        )
        return stored.id, is_inserted

    async def patch_user(self, user_id: UUID,
                         operations: Optional[List[PatchOperation]]) -> None:
        """
        既存ユーザーにJSON Patchを適用する

        操作は保存済みユーザーではなく初期状態の UserToUpdateDTO に適用され、
        その結果で保存済みフィールドを置き換える。パッチで設定されなかった
        フィールドはデフォルト値のまま検証・保存される。
        """
        if operations is None:
            raise MalformedUserRequestError("Patch document is required")

        existing = await self._user_repository.find_by_id(user_id)
        if existing is None:
            raise UserNotFoundError(user_id)

        dto = UserToUpdateDTO()
        errors = apply_patch(dto, operations)
        for field_name, message in validate_user_to_update(dto).items():
            errors.setdefault(field_name, message)
        if errors:
            logger.warning(
                "User patch rejected",
                extra={"user_id": str(user_id), "errors": errors}
            )
            raise UserValidationError(errors)

        user = self._mapper.update_dto_to_entity(dto, user_id)
        await self._user_repository.update(user)
        logger.info("User patched", extra={"user_id": str(user_id)})

    async def delete_user(self, user_id: UUID) -> None:
        user = await self._user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        await self._user_repository.delete(user_id)
        logger.info("User deleted", extra={"user_id": str(user_id)})

    async def list_users(self, page_number: int, page_size: int,
                         link_generator: LinkGenerator) -> Tuple[List[UserDTO], PaginationMetadata]:
        """ユーザー一覧の1ページ分とX-Paginationメタデータを取得"""
        request = PageRequest.normalize(page_number, page_size)
        page = await self._user_repository.get_page(request.page_number, request.page_size)

        items = [self._mapper.to_user_dto(user) for user in page.items]
        metadata = build_pagination_metadata(page, link_generator, LIST_USERS_ENDPOINT)
        return items, metadata
