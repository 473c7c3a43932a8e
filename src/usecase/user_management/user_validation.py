"""
ユーザーDTOのフィールド検証

各関数は camelCase のフィールド名 -> メッセージ の辞書を返す。
空の辞書は検証成功を表す。
"""
import unicodedata
from typing import Dict, Optional

from src.port.dto.user_dto import UserToCreateDTO, UserToUpdateDTO

LOGIN_REQUIRED_MESSAGE = "Login is required"
LOGIN_FORMAT_MESSAGE = "Login should contain only letters or digits"
FIRST_NAME_REQUIRED_MESSAGE = "First name is required"
LAST_NAME_REQUIRED_MESSAGE = "Last name is required"
NAME_FORMAT_MESSAGE = "Name should be a string"


def is_blank(value: Optional[str]) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_alphanumeric_login(login: str) -> bool:
    """文字（L*）と10進数字（Nd）のみ許可。上付き数字や分数は不可"""
    for ch in login:
        category = unicodedata.category(ch)
        if not (category.startswith("L") or category == "Nd"):
            return False
    return True


def _validate_login(login: Optional[str], errors: Dict[str, str]) -> None:
    if is_blank(login):
        errors["login"] = LOGIN_REQUIRED_MESSAGE
    elif not isinstance(login, str) or not is_alphanumeric_login(login):
        errors["login"] = LOGIN_FORMAT_MESSAGE


def _validate_name(value: Optional[str], key: str, required_message: str,
                   errors: Dict[str, str]) -> None:
    if is_blank(value):
        errors[key] = required_message
    elif not isinstance(value, str):
        errors[key] = NAME_FORMAT_MESSAGE


def validate_user_to_create(dto: UserToCreateDTO) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _validate_login(dto.login, errors)
    return errors


def validate_user_to_update(dto: UserToUpdateDTO) -> Dict[str, str]:
    """PUT/PATCH用: ログイン・名・姓すべて必須"""
    errors: Dict[str, str] = {}
    _validate_login(dto.login, errors)
    _validate_name(dto.first_name, "firstName", FIRST_NAME_REQUIRED_MESSAGE, errors)
    _validate_name(dto.last_name, "lastName", LAST_NAME_REQUIRED_MESSAGE, errors)
    return errors
