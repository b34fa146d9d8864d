"""에러 메시지 변환 단위 테스트"""

from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.error_messages import (
    DEFAULT_MESSAGE,
    UNIQUE_FALLBACK_MESSAGE,
    get_error_message,
    get_validation_message,
)


class PgError(Exception):
    """SQLSTATE를 가진 드라이버 예외 흉내"""

    def __init__(self, message: str, pgcode: str):
        super().__init__(message)
        self.pgcode = pgcode


def _integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO users", {}, orig)


class TestIntegrityErrors:
    """무결성 오류 메시지"""

    def test_unique_violation_names_field(self):
        exc = _integrity_error(
            PgError(
                'duplicate key value violates unique constraint '
                '"uq_users_email"',
                "23505",
            )
        )

        assert get_error_message(exc) == "Email already exists"

    def test_unique_violation_without_sqlstate(self):
        """SQLSTATE가 없어도 메시지로 unique 위반 판별"""
        exc = _integrity_error(
            Exception('violates unique constraint "uq_users_email"')
        )

        assert get_error_message(exc) == "Email already exists"

    def test_unique_violation_unknown_constraint_name(self):
        exc = _integrity_error(
            PgError('violates unique constraint "users_pkey"', "23505")
        )

        assert get_error_message(exc) == UNIQUE_FALLBACK_MESSAGE

    def test_other_integrity_error(self):
        exc = _integrity_error(PgError("null value in column", "23502"))

        assert get_error_message(exc) == DEFAULT_MESSAGE

    def test_operational_error(self):
        exc = OperationalError("SELECT 1", {}, Exception("connection lost"))

        assert get_error_message(exc) == DEFAULT_MESSAGE


class TestValidationErrors:
    """검증 오류 메시지"""

    def test_value_error_prefix_removed(self):
        errors = [
            {
                "type": "value_error",
                "loc": ("name",),
                "msg": "Value error, Name is required",
            }
        ]

        assert get_validation_message(errors) == "Name is required"

    def test_last_error_wins(self):
        errors = [
            {"type": "value_error", "loc": ("name",), "msg": "Value error, A"},
            {"type": "value_error", "loc": ("email",), "msg": "Value error, B"},
        ]

        assert get_validation_message(errors) == "B"

    def test_missing_field_message(self):
        errors = [{"type": "missing", "loc": ("body", "email"), "msg": "x"}]

        assert get_validation_message(errors) == "Email is required"

    def test_empty_errors_fall_back(self):
        assert get_validation_message([]) == DEFAULT_MESSAGE


def test_plain_exception_uses_str():
    assert get_error_message(RuntimeError("boom")) == "boom"
    assert get_error_message(RuntimeError()) == DEFAULT_MESSAGE
