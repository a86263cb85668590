"""EncodeService: packs decimal literals and reports the outcome as ServiceResult.

The domain ``construct`` signals malformed input with None; this layer turns
that into a structured ``MALFORMED_INPUT`` error so the CLI can render it.
The configured ``max_length`` bound is applied here, before the core runs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from packdec.domain.grammar import is_valid
from packdec.domain.value import DecimalValue, construct
from packdec.services.result import ServiceError, ServiceResult
from packdec.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from packdec.config.settings import PackdecSettings

logger = logging.getLogger(__name__)


class EncodeService:
    """Encode, validate, and batch-encode decimal literals.

    Usage::

        svc = EncodeService(settings)
        result = svc.encode("-99084.566")
        result.data["hex"]  # "66450899"
    """

    def __init__(self, settings: PackdecSettings) -> None:
        self._settings = settings

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    @traced
    def encode(self, text: str) -> ServiceResult:
        """Encode a single literal."""
        outcome = self._encode_one(text)
        if isinstance(outcome, ServiceError):
            return ServiceResult(ok=False, op="encode", error=outcome)
        return ServiceResult(ok=True, op="encode", data=self._payload(text, outcome))

    @traced
    def validate(self, text: str) -> ServiceResult:
        """Report whether *text* is a well-formed literal.

        Always succeeds; the verdict is in ``data["valid"]``.
        """
        too_long = self._check_length(text)
        valid = too_long is None and is_valid(text)
        warnings = [too_long.message] if too_long is not None else []
        return ServiceResult(
            ok=True,
            op="validate",
            data={"input": text, "valid": valid},
            warnings=warnings,
        )

    @traced
    def encode_batch(
        self,
        texts: Sequence[str],
        *,
        partial: bool | None = None,
    ) -> ServiceResult:
        """Encode many literals. All-or-nothing unless *partial* is True.

        *partial* defaults to the ``[batch] partial`` setting.
        """
        if partial is None:
            partial = self._settings.batch.partial

        encoded: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []

        for i, text in enumerate(texts):
            outcome = self._encode_one(text)
            if isinstance(outcome, DecimalValue):
                encoded.append(self._payload(text, outcome))
                continue

            errors.append({"index": i, "input": text, "error": outcome.message})
            if not partial:
                return ServiceResult(
                    ok=False,
                    op="encode_batch",
                    error=ServiceError(
                        code="BATCH_FAILED",
                        message=f"Item {i} failed: {outcome.message}",
                    ),
                    data={"encoded": encoded, "errors": errors},
                )

        all_ok = not errors
        if not all_ok:
            logger.debug("Batch finished with %d of %d failures", len(errors), len(texts))
        return ServiceResult(
            ok=all_ok,
            op="encode_batch",
            data={"encoded": encoded, "errors": errors},
            error=ServiceError(
                code="BATCH_PARTIAL",
                message=f"{len(errors)} of {len(texts)} items failed",
            )
            if not all_ok
            else None,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_length(self, text: str) -> ServiceError | None:
        limit = self._settings.encode.max_length
        if len(text) <= limit:
            return None
        return ServiceError(
            code="INPUT_TOO_LONG",
            message=f"Literal is {len(text)} characters long (limit {limit})",
            detail={"length": len(text), "max_length": limit},
        )

    def _encode_one(self, text: str) -> DecimalValue | ServiceError:
        too_long = self._check_length(text)
        if too_long is not None:
            return too_long

        with trace_span("construct") as span:
            value = construct(text)
            if span is not None:
                span.annotate("valid", value is not None)

        if value is None:
            logger.debug("Rejected malformed literal %r", text)
            return ServiceError(
                code="MALFORMED_INPUT",
                message=f"Not a valid decimal literal: {text!r}",
                detail={"input": text},
            )
        return value

    def _payload(self, text: str, value: DecimalValue) -> dict[str, Any]:
        return {
            "input": text,
            **value.to_dict(),
            "hex": value.hex(uppercase=self._settings.encode.hex_uppercase),
        }
