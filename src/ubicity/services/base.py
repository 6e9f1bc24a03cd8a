"""BaseService — shared foundation for ubicity services.

Every service receives the resolved :class:`UbiSettings` at construction
time and reads its configuration sections from there.  Services hold no
other state, so one instance may serve any number of calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ubicity.domain.experience import describe_decode_error
from ubicity.services.result import ServiceResult

if TYPE_CHECKING:
    from pydantic import ValidationError

    from ubicity.config.settings import UbiSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class AnalysisService(BaseService):
            def network(self, raw: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: UbiSettings | None = None) -> None:
        if settings is None:
            from ubicity.config.settings import UbiSettings

            settings = UbiSettings()
        self._settings = settings

    @staticmethod
    def _parse_error(op: str, exc: ValidationError) -> ServiceResult:
        """Convert an input decode failure into a failed result."""
        detail = describe_decode_error(exc)
        logger.debug("%s: input decode failed: %s", op, detail)
        return ServiceResult.failure(
            op,
            "PARSE_ERROR",
            f"Parse error: {detail}",
            errors=exc.errors(include_url=False, include_context=False, include_input=False),
        )
