"""ValidationService — non-interactive address checks.

Wraps the domain validator and reports verdicts as ServiceResult so the
CLI can render them as Rich text or JSON.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from emailcheck.domain.rules import describe
from emailcheck.services.base import BaseService
from emailcheck.services.result import ErrorCode, ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class ValidationService(BaseService):
    """Validate one address or a batch of addresses."""

    def _verdict(self, address: str) -> dict[str, Any]:
        rule = self._validator.first_failure(address)
        return {
            "address": address,
            "valid": rule is None,
            "rule": None if rule is None else str(rule),
        }

    def _bounds(self) -> dict[str, Any]:
        return {
            "min_length": self._validator.min_length,
            "max_length": self._validator.max_length,
        }

    def validate(self, address: str) -> ServiceResult:
        """Validate a single address.

        Fails with ``INVALID_ADDRESS`` and the failing rule in
        ``error.detail`` when the address is rejected.
        """
        item = self._verdict(address)
        if item["valid"]:
            logger.debug("Accepted address %r", address)
            return ServiceResult(
                ok=True,
                op="validate_address",
                data={"address": address, "valid": True},
                meta=self._bounds(),
            )

        rule = item["rule"]
        logger.debug("Rejected address %r: %s", address, rule)
        return ServiceResult(
            ok=False,
            op="validate_address",
            data=item,
            error=ServiceError(
                code=ErrorCode.INVALID_ADDRESS,
                message=f"Invalid email address: {describe(rule)}",
                detail={"address": address, "rule": rule},
            ),
            meta=self._bounds(),
        )

    def validate_many(self, addresses: Iterable[str]) -> ServiceResult:
        """Validate every address, reporting each verdict.

        The result is ok only when every address is valid. Items keep
        input order.
        """
        items = [self._verdict(address) for address in addresses]
        valid = sum(1 for item in items if item["valid"])
        invalid = len(items) - valid
        data = {"items": items, "valid": valid, "invalid": invalid}

        if invalid == 0:
            return ServiceResult(ok=True, op="validate_batch", data=data, meta=self._bounds())

        rejected = [item["address"] for item in items if not item["valid"]]
        logger.debug("Rejected %d of %d addresses", invalid, len(items))
        return ServiceResult(
            ok=False,
            op="validate_batch",
            data=data,
            error=ServiceError(
                code=ErrorCode.INVALID_ADDRESS,
                message=f"{invalid} of {len(items)} addresses are invalid",
                detail={"rejected": rejected},
            ),
            meta=self._bounds(),
        )
