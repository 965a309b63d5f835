"""Unit tests for domain validators and Annotated types."""

import pytest
from pydantic import BaseModel, ValidationError

from src.domain.types import Email, Name, Password, VerificationToken
from src.domain.validators import (
    validate_email,
    validate_name,
    validate_strong_password,
    validate_token_format,
)


class _Form(BaseModel):
    name: Name
    email: Email
    password: Password
    token: VerificationToken


@pytest.mark.unit
class TestValidateEmail:
    def test_normalizes_case_and_whitespace(self):
        assert validate_email("  Jane@Example.COM ") == "jane@example.com"

    @pytest.mark.parametrize("value", ["plain", "a@b", "@example.com", "a b@example.com"])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            validate_email(value)


@pytest.mark.unit
class TestValidateStrongPassword:
    def test_accepts_strong_password(self):
        assert validate_strong_password("SecurePass123!") == "SecurePass123!"

    @pytest.mark.parametrize(
        ("value", "reason"),
        [
            ("Sh0rt!", "at least 8"),
            ("securepass123!", "uppercase"),
            ("SECUREPASS123!", "lowercase"),
            ("SecurePass!!!", "digit"),
            ("SecurePass123", "special"),
        ],
    )
    def test_rejects_weak_password(self, value, reason):
        with pytest.raises(ValueError, match=reason):
            validate_strong_password(value)


@pytest.mark.unit
class TestOtherValidators:
    def test_token_must_be_hex(self):
        assert validate_token_format(" abcdef0123 ") == "abcdef0123"
        with pytest.raises(ValueError):
            validate_token_format("not-hex-token")

    def test_name_is_trimmed(self):
        assert validate_name("  admin ") == "admin"
        with pytest.raises(ValueError):
            validate_name("   ")


@pytest.mark.unit
class TestAnnotatedTypes:
    def test_valid_form(self):
        form = _Form(
            name=" Jane ",
            email="JANE@example.com",
            password="SecurePass123!",
            token="a" * 64,
        )

        assert form.name == "Jane"
        assert form.email == "jane@example.com"

    def test_invalid_form_reports_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            _Form(name="", email="bad", password="weak", token="zz")

        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"name", "email", "password", "token"}
