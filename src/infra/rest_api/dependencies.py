"""
FastAPI依存性注入の定義

このモジュールは、FastAPIエンドポイントで使用される依存性注入関数を提供します。
DIコンテナから適切なサービスインスタンスを取得し、FastAPIの依存性システムに
統合するためのアダプターレイヤーとして機能します。

主要機能:
- DIコンテナからのリポジトリ・マッパー取得
- リクエスト単位のUserService組み立て
- リクエストに紐づくリンク生成関数の提供
"""

from fastapi import Depends, Request
from typing import Annotated, Any, Dict

from ..di import get_user_repository, get_user_mapper
from ...port.link_generator import LinkGenerator
from ...port.user_repository import UserRepository
from ...usecase.user_management.user_mapper import UserMapper
from ...usecase.user_management.user_service import UserService

def get_user_repository_dependency() -> UserRepository:
    """
    ユーザーリポジトリの依存性を取得
    
    Returns:
        UserRepository: ユーザーデータアクセスインスタンス
    """
    return get_user_repository()

def get_user_mapper_dependency() -> UserMapper:
    """
    マッパーの依存性を取得
    
    Returns:
        UserMapper: エンティティとDTOの変換インスタンス
    """
    return get_user_mapper()

def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repository_dependency)],
    mapper: Annotated[UserMapper, Depends(get_user_mapper_dependency)]
) -> UserService:
    """
    ユーザー管理サービスを取得
    
    Args:
        user_repo: ユーザーリポジトリインスタンス
        mapper: マッパーインスタンス
    
    Returns:
        UserService: リポジトリとマッパーを注入したサービス
    """
    return UserService(user_repo, mapper)

def get_link_generator(request: Request) -> LinkGenerator:
    """
    リクエストのベースURLを用いたリンク生成関数を取得
    
    パラメータはすべてクエリ文字列として付与するため、
    パスパラメータを持たないエンドポイント専用です。
    """
    def generate(endpoint: str, params: Dict[str, Any]) -> str:
        url = request.url_for(endpoint)
        return str(url.include_query_params(**params))
    return generate
