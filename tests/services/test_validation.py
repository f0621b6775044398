"""Tests for ValidationService."""

from emailcheck.config.settings import EmailCheckSettings
from emailcheck.services.validation import ValidationService


class TestValidate:
    def test_valid_address(self, settings: EmailCheckSettings) -> None:
        result = ValidationService(settings).validate("user@example.com")
        assert result.ok
        assert result.op == "validate_address"
        assert result.data == {"address": "user@example.com", "valid": True}
        assert result.meta == {"min_length": 5, "max_length": 256}

    def test_invalid_address(self, settings: EmailCheckSettings) -> None:
        result = ValidationService(settings).validate("user@example.c")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ADDRESS"
        assert result.error.detail == {"address": "user@example.c", "rule": "tld_length"}
        assert "Top-level domain" in result.error.message
        assert result.data["valid"] is False

    def test_uses_configured_bounds(self) -> None:
        settings = EmailCheckSettings.from_cli(
            validation={"min_length": 20},
        )
        result = ValidationService(settings).validate("user@example.com")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["rule"] == "length"


class TestValidateMany:
    def test_all_valid(self, settings: EmailCheckSettings) -> None:
        result = ValidationService(settings).validate_many(["user@example.com", "x@y.io"])
        assert result.ok
        assert result.op == "validate_batch"
        assert result.data["valid"] == 2
        assert result.data["invalid"] == 0
        assert [i["rule"] for i in result.data["items"]] == [None, None]

    def test_mixed(self, settings: EmailCheckSettings) -> None:
        addresses = ["user@example.com", "us er@example.com", "a@b.c"]
        result = ValidationService(settings).validate_many(addresses)
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "2 of 3 addresses are invalid"
        assert result.error.detail == {"rejected": ["us er@example.com", "a@b.c"]}
        items = result.data["items"]
        assert [i["address"] for i in items] == addresses
        assert [i["rule"] for i in items] == [None, "whitespace", "tld_length"]

    def test_accepts_generator(self, settings: EmailCheckSettings) -> None:
        result = ValidationService(settings).validate_many(a for a in ["x@y.io"])
        assert result.data["valid"] == 1
