"""Tests for pydantic config section models."""

import pytest
from pydantic import ValidationError

from emailcheck.config.models import PromptConfig, ValidationConfig
from emailcheck.domain.validator import EmailSyntaxValidator


class TestValidationConfig:
    def test_defaults(self) -> None:
        cfg = ValidationConfig()
        assert cfg.min_length == 5
        assert cfg.max_length == 256

    def test_frozen(self) -> None:
        cfg = ValidationConfig()
        with pytest.raises(ValidationError):
            cfg.min_length = 1  # type: ignore[misc]

    def test_rejects_negative_min(self) -> None:
        with pytest.raises(ValidationError):
            ValidationConfig(min_length=-1)

    def test_rejects_max_below_min(self) -> None:
        with pytest.raises(ValidationError, match="max_length"):
            ValidationConfig(min_length=20, max_length=10)

    def test_build_validator(self) -> None:
        validator = ValidationConfig(min_length=6, max_length=40).build_validator()
        assert isinstance(validator, EmailSyntaxValidator)
        assert validator.min_length == 6
        assert validator.max_length == 40


class TestPromptConfig:
    def test_defaults(self) -> None:
        cfg = PromptConfig()
        assert cfg.message == "Please enter your email address: "
        assert cfg.max_input_length == 255

    def test_rejects_zero_input_length(self) -> None:
        with pytest.raises(ValidationError):
            PromptConfig(max_input_length=0)
