"""Contract validation of loosely typed JSON payloads."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from site_smoke.models.base import Model


@dataclass(frozen=True, kw_only=True)
class FieldError:
    """A missing or mismatched field in a payload."""

    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


@dataclass(frozen=True, kw_only=True)
class PayloadValidation[T: Model]:
    """Either a validated record or the list of field errors."""

    record: T | None = None
    errors: Sequence[FieldError] = field(default_factory=tuple)

    @property
    def valid(self) -> bool:
        return self.record is not None


def validate_payload[T: Model](model: type[T], payload: Any) -> PayloadValidation[T]:
    """Validate a decoded JSON payload against a response contract.

    Args:
        model: Contract the payload must satisfy
        payload: Decoded JSON value

    Returns:
        Validation result holding the typed record, or every field error
        reported by pydantic when the payload does not match.

    """
    try:
        record = model.model_validate(payload)
    except ValidationError as exc:
        return PayloadValidation(
            errors=tuple(
                FieldError(
                    location=".".join(str(part) for part in error["loc"]) or "<root>",
                    message=error["msg"],
                )
                for error in exc.errors()
            )
        )
    return PayloadValidation(record=record)
