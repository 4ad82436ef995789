"""DigitService — decompose/recompose behind the ServiceResult contract.

The domain functions raise; this layer catches :class:`DigitsError`,
logs it, and reports it as a structured :class:`ServiceError` so callers
that prefer result objects over exceptions never see a raise.
``TypeError`` is a programming error and still propagates.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from intdigits.config.models import ConversionConfig
from intdigits.config.settings import DigitsSettings
from intdigits.domain.digits import digits_from_int, int_from_digits
from intdigits.domain.errors import DigitsError
from intdigits.domain.widths import IntWidth
from intdigits.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _failure(op: str, width: IntWidth, exc: DigitsError) -> ServiceResult:
    logger.warning(
        "%s failed [%s]: %s",
        op,
        exc.code,
        exc,
        extra={"op": op, "width": str(width), "code": exc.code},
    )
    return ServiceResult.failure(op, exc)


class DigitService:
    """Digit conversions with a configurable default width.

    Only an explicit *settings* object (e.g. ``DigitsSettings.load()``)
    brings in ``INTDIGITS_*`` env vars and ``intdigits.toml``. Without
    one the service uses the code defaults, so the same call always gives
    the same result.

    Usage::

        service = DigitService(DigitsSettings.load())
        result = service.decompose(369)
        assert result.data["digits"] == [3, 6, 9]
    """

    def __init__(self, settings: DigitsSettings | None = None) -> None:
        self._conversion = settings.conversion if settings is not None else ConversionConfig()

    @property
    def default_width(self) -> IntWidth:
        return self._conversion.default_width

    def decompose(self, value: int, *, width: IntWidth | None = None) -> ServiceResult:
        """Split *value* into its decimal digits."""
        op = "decompose"
        width = width or self.default_width
        start = time.perf_counter()
        try:
            digits = digits_from_int(value, width=width)
        except DigitsError as exc:
            return _failure(op, width, exc)
        logger.debug(
            "Decomposed %d into %d digits",
            value,
            len(digits),
            extra={"op": op, "width": str(width)},
        )
        return ServiceResult.success(
            op,
            {"value": value, "width": str(width), "digits": digits, "count": len(digits)},
            duration_ms=_elapsed_ms(start),
        )

    def recompose(
        self, digits: Iterable[int], *, width: IntWidth | None = None
    ) -> ServiceResult:
        """Join most-significant-first *digits* into one integer.

        Leading zeros are accepted and reported in ``warnings``.
        """
        op = "recompose"
        width = width or self.default_width
        values = list(digits)
        start = time.perf_counter()
        try:
            value = int_from_digits(values, width=width)
        except DigitsError as exc:
            return _failure(op, width, exc)

        warnings: list[str] = []
        if len(values) > 1 and values[0] == 0:
            leading = len(values) - len(digits_from_int(value, width=width))
            warnings.append(f"Ignored {leading} leading zero(s)")
        logger.debug(
            "Recomposed %d digits into %d",
            len(values),
            value,
            extra={"op": op, "width": str(width)},
        )
        return ServiceResult.success(
            op,
            {"digits": values, "width": str(width), "value": value},
            duration_ms=_elapsed_ms(start),
            warnings=warnings,
        )
