"""Rule names and the fixed hint list shown for rejected addresses.

Rules are listed in the order the validator applies them.
"""

from __future__ import annotations

from enum import StrEnum


class Rule(StrEnum):
    """One syntax check applied by the validator."""

    MISSING = "missing"
    LENGTH = "length"
    WHITESPACE = "whitespace"
    SEPARATOR_COUNT = "separator_count"
    SEPARATOR_EDGE = "separator_edge"
    LOCAL_EDGE_DOT = "local_edge_dot"
    LOCAL_CONSECUTIVE_DOTS = "local_consecutive_dots"
    DOMAIN_EDGE = "domain_edge"
    DOMAIN_NO_DOT = "domain_no_dot"
    TLD_LENGTH = "tld_length"
    DOMAIN_CONSECUTIVE_DOTS = "domain_consecutive_dots"
    LOCAL_CHARSET = "local_charset"
    DOMAIN_CHARSET = "domain_charset"


RULE_DESCRIPTIONS: dict[str, str] = {
    "missing": "No address was given",
    "length": "Address length is out of bounds",
    "whitespace": "Address contains whitespace",
    "separator_count": "Address must contain exactly one '@'",
    "separator_edge": "Address needs text before and after '@'",
    "local_edge_dot": "Local part starts or ends with '.'",
    "local_consecutive_dots": "Local part contains '..'",
    "domain_edge": "Domain starts or ends with '.' or '-'",
    "domain_no_dot": "Domain contains no '.'",
    "tld_length": "Top-level domain is shorter than 2 characters",
    "domain_consecutive_dots": "Domain contains '..'",
    "local_charset": "Local part contains a character outside [A-Za-z0-9._+-]",
    "domain_charset": "Domain contains a character outside [A-Za-z0-9.-]",
}


def describe(rule: str) -> str:
    """Return a one-line description of *rule*.

    Examples:
        >>> describe("tld_length")
        'Top-level domain is shorter than 2 characters'
    """
    return RULE_DESCRIPTIONS.get(rule, rule)


def invalid_hints(min_length: int, max_length: int) -> list[str]:
    """Fixed hint list shown on any invalid verdict.

    The list describes rule categories, not the specific failing check.
    """
    return [
        "Must contain exactly one '@' symbol",
        "Must have text before and after '@'",
        "Domain must contain at least one '.' (dot)",
        "Must end with valid domain extension (at least 2 characters)",
        "No spaces allowed",
        "Cannot start or end with '.' or '-'",
        f"Length must be between {min_length} and {max_length} characters",
    ]
