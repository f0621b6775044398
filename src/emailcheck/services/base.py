"""BaseService — shared foundation for emailcheck services.

Every service receives the frozen :class:`EmailCheckSettings` at
construction time and builds its validator from the ``[validation]``
section, so a service never validates with bounds other than the
configured ones.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from emailcheck.config.settings import EmailCheckSettings
    from emailcheck.domain.validator import EmailSyntaxValidator

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def validate(self, address: str) -> ServiceResult:
                rule = self._validator.first_failure(address)
                ...
    """

    def __init__(self, settings: EmailCheckSettings) -> None:
        self._settings = settings
        self._validator: EmailSyntaxValidator = settings.validation.build_validator()
        logger.debug("Service %s using %r", type(self).__name__, self._validator)
