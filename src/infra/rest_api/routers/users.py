from fastapi import APIRouter, Body, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from typing import List, Optional
from uuid import UUID

from ..dependencies import get_link_generator, get_user_service
from ..schemas import (
    PatchOperationRequest, UserResponse, UserToCreateRequest, UserToUpdateRequest
)
from ....port.dto.patch_dto import PatchOperation
from ....port.dto.user_dto import UserDTO, UserToCreateDTO, UserToUpdateDTO
from ....port.link_generator import LinkGenerator
from ....usecase.user_management.pagination import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from ....usecase.user_management.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"]
)

ALLOWED_COLLECTION_METHODS = "GET, POST, OPTIONS"
JSON_MEDIA_TYPE = "application/json; charset=utf-8"


def user_dto_to_response(user: UserDTO) -> UserResponse:
    """UserDTOをレスポンススキーマに変換"""
    return UserResponse(
        id=user.id,
        login=user.login,
        full_name=user.full_name,
        games_played=user.games_played,
        current_game_id=user.current_game_id
    )


def created_response(request: Request, user_id: UUID) -> JSONResponse:
    """201 Created: Locationヘッダーと新しいIDを返す"""
    location = request.url_for("get_user_by_id", user_id=str(user_id))
    return JSONResponse(
        status_code=201,
        content=str(user_id),
        headers={"Location": str(location)}
    )


# GETより先に登録し、HEADリクエストを本文なしで処理する
@router.head("/{user_id}")
async def head_user_by_id(
    user_id: UUID,
    service: UserService = Depends(get_user_service)
):
    """ユーザーの存在確認（本文なし）"""
    await service.get_user(user_id)
    return Response(status_code=200, media_type=JSON_MEDIA_TYPE)


@router.get("/{user_id}", name="get_user_by_id", response_model=UserResponse)
async def get_user_by_id(
    user_id: UUID,
    service: UserService = Depends(get_user_service)
):
    """ユーザーを取得"""
    user = await service.get_user(user_id)
    return user_dto_to_response(user)


@router.post("", status_code=201)
async def create_user(
    request: Request,
    user: Optional[UserToCreateRequest] = Body(default=None),
    service: UserService = Depends(get_user_service)
):
    """新規ユーザーを作成"""
    dto = None
    if user is not None:
        # 未指定のフィールドはDTOのデフォルト値を使う
        dto = UserToCreateDTO(**user.model_dump(exclude_unset=True))

    created = await service.create_user(dto)
    return created_response(request, created.id)


@router.put("/{user_id}")
async def update_user(
    user_id: UUID,
    request: Request,
    user: Optional[UserToUpdateRequest] = Body(default=None),
    service: UserService = Depends(get_user_service)
):
    """ユーザーを置き換え、存在しなければ作成"""
    dto = UserToUpdateDTO(**user.model_dump()) if user is not None else None

    stored_id, is_inserted = await service.upsert_user(user_id, dto)
    if is_inserted:
        return created_response(request, stored_id)
    return Response(status_code=204)


@router.patch("/{user_id}", status_code=204)
async def partially_update_user(
    user_id: UUID,
    patch_document: Optional[List[PatchOperationRequest]] = Body(default=None),
    service: UserService = Depends(get_user_service)
):
    """JSON Patchでユーザーを部分更新"""
    operations = None
    if patch_document is not None:
        operations = [
            PatchOperation(op=o.op, path=o.path, value=o.value, from_path=o.from_)
            for o in patch_document
        ]

    await service.patch_user(user_id, operations)
    return Response(status_code=204)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: UUID,
    service: UserService = Depends(get_user_service)
):
    """ユーザーを削除"""
    await service.delete_user(user_id)
    return Response(status_code=204)


@router.get("", name="get_users", response_model=List[UserResponse])
async def get_users(
    response: Response,
    page_number: int = Query(default=DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, alias="pageSize"),
    service: UserService = Depends(get_user_service),
    link_generator: LinkGenerator = Depends(get_link_generator)
):
    """ユーザー一覧を取得（ページ情報はX-Paginationヘッダー）"""
    users, metadata = await service.list_users(page_number, page_size, link_generator)
    response.headers["X-Pagination"] = metadata.to_header_value()
    return [user_dto_to_response(u) for u in users]


@router.options("")
async def get_users_options():
    """コレクションで利用可能なメソッド"""
    return Response(status_code=200, headers={"Allow": ALLOWED_COLLECTION_METHODS})
