"""
ユーザー関連の例外クラス

このモジュールは、ユーザー管理に関する例外を定義します。
取得・作成・更新・削除の各操作で発生する例外を統一的に管理し、
REST層のエラーハンドラーがHTTPステータスへ変換します。
"""
from typing import Dict
from uuid import UUID


class UserError(Exception):
    """ユーザー操作の基底例外"""
    pass


class UserNotFoundError(UserError):
    """指定されたユーザーが見つからない場合の例外"""
    def __init__(self, user_id: UUID):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class MalformedUserRequestError(UserError):
    """リクエスト自体が不正な場合の例外（本文なし、空のID等）"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserValidationError(UserError):
    """フィールド単位のバリデーションに失敗した場合の例外"""
    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"User validation error: {fields}")
