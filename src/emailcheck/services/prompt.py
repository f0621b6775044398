"""PromptService — interactive read/validate/retry loop.

Reads one line per attempt from a text stream until a valid address is
entered or the stream is exhausted:

- over-long lines and empty lines are rejected before validation
- an invalid verdict prints the fixed hint list (not the failing rule)
- end of input ends the loop with an ``INPUT_EXHAUSTED`` error

All chatter (prompt, per-attempt errors, hints) goes through *echo*;
the final outcome is returned as a ServiceResult.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TextIO

from emailcheck.domain.rules import invalid_hints
from emailcheck.services.base import BaseService
from emailcheck.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from emailcheck.config.settings import EmailCheckSettings

logger = logging.getLogger(__name__)

Echo = Callable[..., None]


def _stderr_echo(message: str = "", nl: bool = True) -> None:
    import click

    click.echo(message, nl=nl, err=True)


def strip_terminator(line: str) -> str:
    """Remove a single trailing line terminator.

    Examples:
        >>> strip_terminator("user@example.com\\n")
        'user@example.com'
        >>> strip_terminator("user@example.com\\r\\n")
        'user@example.com'
        >>> strip_terminator("a\\n\\n")
        'a\\n'
        >>> strip_terminator("a\\r")
        'a\\r'
    """
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class PromptService(BaseService):
    """Collect a syntactically valid address from a line-oriented stream."""

    def __init__(
        self,
        settings: EmailCheckSettings,
        *,
        stream: TextIO,
        echo: Echo | None = None,
    ) -> None:
        super().__init__(settings)
        self._stream = stream
        self._echo: Echo = echo or _stderr_echo
        self._prompt = self._settings.prompt

    def hints(self) -> list[str]:
        """Hint lines shown after an invalid verdict."""
        upper = min(self._validator.max_length, self._prompt.max_input_length)
        return invalid_hints(self._validator.min_length, upper)

    def _show_hints(self) -> None:
        self._echo("✗ Invalid email address. Please check the following:")
        for hint in self.hints():
            self._echo(f"  - {hint}")
        self._echo()

    def _read_line(self, limit: int) -> str:
        """Read one line, keeping at most *limit* + 2 characters of it.

        The rest of a longer line is read and dropped, so the kept part
        still fails the length check and the next read starts on a fresh
        line.
        """
        size = limit + 2
        raw = self._stream.readline(size)
        if len(raw) == size and not raw.endswith("\n"):
            while True:
                rest = self._stream.readline(size)
                if not rest or rest.endswith("\n"):
                    break
        return raw

    def collect(self) -> ServiceResult:
        """Prompt until a valid address is read or input runs out."""
        attempts = 0
        limit = self._prompt.max_input_length

        while True:
            self._echo(self._prompt.message, nl=False)
            raw = self._read_line(limit)
            if not raw:
                self._echo()
                logger.debug("Input exhausted after %d attempt(s)", attempts)
                return ServiceResult(
                    ok=False,
                    op="collect_address",
                    error=ServiceError(
                        code=ErrorCode.INPUT_EXHAUSTED,
                        message="Failed to read input",
                        detail={"attempts": attempts},
                    ),
                )

            attempts += 1
            line = strip_terminator(raw)

            if len(line) > limit:
                logger.debug("Attempt %d rejected: %d chars exceeds %d", attempts, len(line), limit)
                self._echo(f"Error: Email address is too long (maximum {limit} characters)")
                continue

            if not line:
                logger.debug("Attempt %d rejected: empty input", attempts)
                self._echo("Error: Please enter a non-empty email address")
                continue

            if self._validator.is_valid(line):
                self._echo(f"✓ Valid email address entered: {line}")
                return ServiceResult(
                    ok=True,
                    op="collect_address",
                    data={"address": line, "attempts": attempts},
                )

            logger.debug(
                "Attempt %d rejected: %s",
                attempts,
                self._validator.first_failure(line),
            )
            self._show_hints()
