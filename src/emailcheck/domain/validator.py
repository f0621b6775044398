"""Email address syntax validation.

A practical subset of address syntax, not RFC 5322. Checks run in a
fixed order and the first failing check decides the verdict:

1. absent input            8. domain edges ('.' / '-')
2. length bounds           9. domain has a '.'
3. no whitespace          10. top-level domain >= 2 chars
4. exactly one '@'        11. no '..' in domain
5. '@' not at an edge     12. local-part charset
6. local edge dots        13. domain charset
7. no '..' in local part

Pure functions, no infrastructure dependencies.

INVARIANT: ``is_valid`` never raises. Invalid input is ``False``.
"""

from __future__ import annotations

import string
from collections.abc import Callable

from emailcheck.domain.rules import Rule

DEFAULT_MIN_LENGTH = 5
DEFAULT_MAX_LENGTH = 256

# Pinned to ASCII: str.isalnum()/str.isspace() accept other scripts.
_WHITESPACE = frozenset(" \t\n\r\v\f")
_ALNUM = frozenset(string.ascii_letters + string.digits)
_LOCAL_CHARS = _ALNUM | frozenset(".-_+")
_DOMAIN_CHARS = _ALNUM | frozenset(".-")
_MIN_TLD_LENGTH = 2

PartCheck = Callable[[str, str], bool]


def _separator_inside(local: str, domain: str) -> bool:
    return bool(local) and bool(domain)


def _local_edges(local: str, domain: str) -> bool:
    return not (local.startswith(".") or local.endswith("."))


def _local_no_double_dot(local: str, domain: str) -> bool:
    return ".." not in local


def _domain_edges(local: str, domain: str) -> bool:
    return domain[0] not in ".-" and domain[-1] not in ".-"


def _domain_has_dot(local: str, domain: str) -> bool:
    return "." in domain


def _tld_length(local: str, domain: str) -> bool:
    return len(domain.rpartition(".")[2]) >= _MIN_TLD_LENGTH


def _domain_no_double_dot(local: str, domain: str) -> bool:
    return ".." not in domain


def _local_charset(local: str, domain: str) -> bool:
    return all(ch in _LOCAL_CHARS for ch in local)


def _domain_charset(local: str, domain: str) -> bool:
    return all(ch in _DOMAIN_CHARS for ch in domain)


# Ordered checks over the (local, domain) split.
PART_CHECKS: tuple[tuple[Rule, PartCheck], ...] = (
    (Rule.SEPARATOR_EDGE, _separator_inside),
    (Rule.LOCAL_EDGE_DOT, _local_edges),
    (Rule.LOCAL_CONSECUTIVE_DOTS, _local_no_double_dot),
    (Rule.DOMAIN_EDGE, _domain_edges),
    (Rule.DOMAIN_NO_DOT, _domain_has_dot),
    (Rule.TLD_LENGTH, _tld_length),
    (Rule.DOMAIN_CONSECUTIVE_DOTS, _domain_no_double_dot),
    (Rule.LOCAL_CHARSET, _local_charset),
    (Rule.DOMAIN_CHARSET, _domain_charset),
)


def _as_text(candidate: object) -> str | None:
    if isinstance(candidate, str):
        return candidate
    if isinstance(candidate, (bytes, bytearray)):
        try:
            return bytes(candidate).decode("utf-8")
        except UnicodeDecodeError:
            return None
    return None


def split_address(address: str) -> tuple[str, str]:
    """Split on the first '@' into (local, domain).

    Examples:
        >>> split_address("user@example.com")
        ('user', 'example.com')
        >>> split_address("user")
        ('user', '')
    """
    local, _, domain = address.partition("@")
    return local, domain


class EmailSyntaxValidator:
    """Stateless address predicate with configurable length bounds.

    Both bounds are inclusive. Instances are immutable and safe to share
    between threads.

    Usage::

        validator = EmailSyntaxValidator(min_length=6)
        validator.is_valid("user@example.com")  # True
    """

    __slots__ = ("_min_length", "_max_length")

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        if min_length < 0:
            msg = f"min_length must be >= 0, got {min_length}"
            raise ValueError(msg)
        if max_length < min_length:
            msg = f"max_length ({max_length}) must be >= min_length ({min_length})"
            raise ValueError(msg)
        self._min_length = min_length
        self._max_length = max_length

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def max_length(self) -> int:
        return self._max_length

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min_length={self._min_length}, "
            f"max_length={self._max_length})"
        )

    def first_failure(self, candidate: object) -> Rule | None:
        """Return the first rule *candidate* breaks, or None if it is valid."""
        text = _as_text(candidate)
        if text is None:
            return Rule.MISSING
        if not self._min_length <= len(text) <= self._max_length:
            return Rule.LENGTH
        if any(ch in _WHITESPACE for ch in text):
            return Rule.WHITESPACE
        if text.count("@") != 1:
            return Rule.SEPARATOR_COUNT

        local, domain = split_address(text)
        for rule, check in PART_CHECKS:
            if not check(local, domain):
                return rule
        return None

    def is_valid(self, candidate: object) -> bool:
        """Check whether *candidate* is a syntactically valid address."""
        return self.first_failure(candidate) is None


_DEFAULT = EmailSyntaxValidator()


def is_valid(candidate: object) -> bool:
    """Validate *candidate* with the default length bounds (5..256).

    Examples:
        >>> is_valid("user@example.com")
        True
        >>> is_valid("user@example.c")
        False
        >>> is_valid(None)
        False
    """
    return _DEFAULT.is_valid(candidate)


def first_failure(candidate: object) -> Rule | None:
    """Return the first failing rule under the default bounds, or None."""
    return _DEFAULT.first_failure(candidate)
