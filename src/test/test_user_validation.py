"""
User DTO validation tests
"""

import pytest

from src.port.dto.user_dto import UserToCreateDTO, UserToUpdateDTO
from src.usecase.user_management.user_validation import (
    FIRST_NAME_REQUIRED_MESSAGE, LAST_NAME_REQUIRED_MESSAGE, NAME_FORMAT_MESSAGE,
    LOGIN_FORMAT_MESSAGE, LOGIN_REQUIRED_MESSAGE,
    validate_user_to_create, validate_user_to_update
)


class TestValidateUserToCreate:

    def test_alphanumeric_login_is_accepted(self):
        assert validate_user_to_create(UserToCreateDTO(login="abc123")) == {}

    @pytest.mark.parametrize("login", ["abc_123", "abc 123", "abc-123", "abc!", "abc\t"])
    def test_login_with_symbols_or_whitespace_is_rejected(self, login):
        errors = validate_user_to_create(UserToCreateDTO(login=login))
        assert errors == {"login": LOGIN_FORMAT_MESSAGE}

    @pytest.mark.parametrize("login", [None, "", "   "])
    def test_missing_login_is_rejected(self, login):
        errors = validate_user_to_create(UserToCreateDTO(login=login))
        assert errors == {"login": LOGIN_REQUIRED_MESSAGE}

    def test_non_ascii_letters_are_letters(self):
        assert validate_user_to_create(UserToCreateDTO(login="Пользователь1")) == {}

    @pytest.mark.parametrize("login", ["abc\u00b2", "abc\u00bd", "\u2460"])
    def test_digit_like_symbols_are_rejected(self, login):
        errors = validate_user_to_create(UserToCreateDTO(login=login))
        assert errors == {"login": LOGIN_FORMAT_MESSAGE}

    def test_names_are_optional_on_create(self):
        dto = UserToCreateDTO(login="neo", first_name=None, last_name=None)
        assert validate_user_to_create(dto) == {}


class TestValidateUserToUpdate:

    def test_complete_dto_is_valid(self):
        dto = UserToUpdateDTO(login="neo", first_name="Thomas", last_name="Anderson")
        assert validate_user_to_update(dto) == {}

    def test_default_dto_reports_every_field(self):
        errors = validate_user_to_update(UserToUpdateDTO())
        assert errors == {
            "login": LOGIN_REQUIRED_MESSAGE,
            "firstName": FIRST_NAME_REQUIRED_MESSAGE,
            "lastName": LAST_NAME_REQUIRED_MESSAGE,
        }

    def test_login_format_applies_to_updates(self):
        dto = UserToUpdateDTO(login="neo.one", first_name="Thomas", last_name="Anderson")
        assert validate_user_to_update(dto) == {"login": LOGIN_FORMAT_MESSAGE}

    def test_non_string_login_is_rejected(self):
        dto = UserToUpdateDTO(login=123, first_name="Thomas", last_name="Anderson")
        assert validate_user_to_update(dto) == {"login": LOGIN_FORMAT_MESSAGE}

    @pytest.mark.parametrize("value", [["x"], {"a": 1}, 7])
    def test_non_string_names_are_rejected(self, value):
        dto = UserToUpdateDTO(login="neo", first_name=value, last_name=value)
        assert validate_user_to_update(dto) == {
            "firstName": NAME_FORMAT_MESSAGE,
            "lastName": NAME_FORMAT_MESSAGE,
        }
