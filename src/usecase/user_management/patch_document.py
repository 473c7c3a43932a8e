"""
JSON Patch (RFC 6902) の適用 - ユースケース層

UserToUpdateDTO のフラットなフィールドのみを対象とする。
失敗した操作は例外を送出せずパスごとに収集し、
呼び出し側でバリデーションエラーとまとめて返せるようにする。
"""
from dataclasses import fields
from typing import Dict, List, Optional

from src.port.dto.patch_dto import PatchOperation
from src.port.dto.user_dto import UserToUpdateDTO

# パスのセグメント（小文字化・アンダースコア除去済み） -> DTO属性名
_PATCHABLE_FIELDS = {
    "login": "login",
    "firstname": "first_name",
    "lastname": "last_name",
}

# DTO属性名 -> エラーキーに使うcamelCaseのフィールド名
TRANSPORT_FIELD_NAMES = {
    "login": "login",
    "first_name": "firstName",
    "last_name": "lastName",
}

SUPPORTED_OPERATIONS = ("add", "replace", "remove", "copy", "move", "test")


class PatchOperationError(Exception):
    """個々の操作が適用できなかった場合の例外"""
    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def resolve_field(path: Optional[str]) -> str:
    """'/firstName' のようなJSON PointerをDTOの属性名に変換"""
    if not path or not path.startswith("/"):
        raise PatchOperationError(path or "", "Path must be a JSON pointer starting with '/'")

    segment = path[1:]
    if "/" in segment:
        raise PatchOperationError(path, "Nested paths are not supported")

    key = segment.replace("_", "").lower()
    if key not in _PATCHABLE_FIELDS:
        raise PatchOperationError(path, f"The target location specified by path '{path}' was not found")
    return _PATCHABLE_FIELDS[key]


def error_key(path: str) -> str:
    """解決できるパスはcamelCaseのフィールド名、それ以外は先頭の'/'を除いたパス"""
    try:
        return TRANSPORT_FIELD_NAMES[resolve_field(path)]
    except PatchOperationError:
        return path.lstrip("/") or "patch"


def _default_of(attribute: str):
    for dto_field in fields(UserToUpdateDTO):
        if dto_field.name == attribute:
            return dto_field.default
    return None


def _require_string(operation: PatchOperation) -> None:
    # 対象フィールドはすべて文字列
    if operation.value is not None and not isinstance(operation.value, str):
        raise PatchOperationError(
            operation.path, f"The value '{operation.value}' is invalid for target location"
        )


def apply_operation(dto: UserToUpdateDTO, operation: PatchOperation) -> None:
    op = (operation.op or "").lower()
    if op not in SUPPORTED_OPERATIONS:
        raise PatchOperationError(operation.path or "", f"Unsupported operation '{operation.op}'")

    attribute = resolve_field(operation.path)

    if op in ("add", "replace"):
        _require_string(operation)
        setattr(dto, attribute, operation.value)
    elif op == "remove":
        setattr(dto, attribute, _default_of(attribute))
    elif op in ("copy", "move"):
        if operation.from_path is None:
            raise PatchOperationError(operation.path, f"'{op}' requires a 'from' location")
        source = resolve_field(operation.from_path)
        setattr(dto, attribute, getattr(dto, source))
        if op == "move" and source != attribute:
            setattr(dto, source, _default_of(source))
    elif op == "test":
        _require_string(operation)
        if getattr(dto, attribute) != operation.value:
            raise PatchOperationError(operation.path, "The current value does not match the test value")


def apply_patch(dto: UserToUpdateDTO, operations: List[PatchOperation]) -> Dict[str, str]:
    """
    操作を順に dto へ適用する（dto はその場で変更される）

    失敗した操作を フィールド名 -> メッセージ で返す。空の辞書は全操作の成功を表す。
    失敗後も後続の操作は適用し、問題をまとめて報告する。
    """
    errors: Dict[str, str] = {}
    for operation in operations:
        try:
            apply_operation(dto, operation)
        except PatchOperationError as e:
            errors.setdefault(error_key(e.path), e.message)
    return errors
