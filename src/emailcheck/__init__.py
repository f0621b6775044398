"""emailcheck — practical email address syntax validation."""

from emailcheck.domain.validator import EmailSyntaxValidator, first_failure, is_valid

__version__ = "0.1.0"

__all__ = ["EmailSyntaxValidator", "__version__", "first_failure", "is_valid"]
