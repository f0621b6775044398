"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, emailcheck.toml only contains
overrides. An empty file (or no file) is a complete configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from emailcheck.domain.validator import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    EmailSyntaxValidator,
)

# --- emailcheck.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    min_length: int = Field(default=DEFAULT_MIN_LENGTH, ge=0)
    max_length: int = Field(default=DEFAULT_MAX_LENGTH, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> ValidationConfig:
        if self.max_length < self.min_length:
            msg = f"max_length ({self.max_length}) must be >= min_length ({self.min_length})"
            raise ValueError(msg)
        return self

    def build_validator(self) -> EmailSyntaxValidator:
        """Return a validator configured with these bounds."""
        return EmailSyntaxValidator(min_length=self.min_length, max_length=self.max_length)


class PromptConfig(BaseModel):
    """[prompt] section."""

    model_config = {"frozen": True}

    message: str = "Please enter your email address: "
    max_input_length: int = Field(default=255, ge=1)
