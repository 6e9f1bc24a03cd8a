"""Experience validation — required fields and coordinate ranges.

``ExperienceValidator.validate`` never raises.  Decode failures come back
as a single ``"Parse error: ..."`` message; semantic violations are
accumulated in a fixed order so the same input always yields the same
error list.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ubicity.domain.experience import Experience, describe_decode_error, parse_experience

logger = logging.getLogger(__name__)

LATITUDE_RANGE: tuple[float, float] = (-90.0, 90.0)
LONGITUDE_RANGE: tuple[float, float] = (-180.0, 180.0)


class ValidationResult(BaseModel):
    """Outcome of validating one experience."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> ValidationResult:
        return cls(valid=not errors, errors=errors)


class ValidatorConfig(BaseModel):
    """Validator options, frozen after construction.

    ``strict_mode`` has no effect on the current rule set.  New rules
    (timestamp format, domain whitelists) should read it from here.
    """

    model_config = ConfigDict(frozen=True)

    strict_mode: bool = False


class ExperienceValidator:
    """Checks experience records against the required-field rules."""

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self._config = config or ValidatorConfig()

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def strict_mode(self) -> bool:
        return self._config.strict_mode

    def validate(self, raw: str | bytes) -> ValidationResult:
        """Decode *raw* JSON and validate it.

        A decode failure short-circuits with exactly one error; no field
        checks are attempted on a record that could not be built.
        """
        try:
            exp = parse_experience(raw)
        except ValidationError as exc:
            detail = describe_decode_error(exc)
            logger.debug("Experience decode failed: %s", detail)
            return ValidationResult.from_errors([f"Parse error: {detail}"])
        return self.validate_experience(exp)

    def validate_experience(self, exp: Experience) -> ValidationResult:
        """Run every rule against an already-decoded experience."""
        errors: list[str] = []

        required = (
            (exp.id, "id"),
            (exp.timestamp, "timestamp"),
            (exp.learner.id, "learner.id"),
            (exp.context.location.name, "context.location.name"),
            (exp.experience.type, "experience.type"),
            (exp.experience.description, "experience.description"),
        )
        for value, path in required:
            if not value:
                errors.append(f"{path} is required")

        coords = exp.context.location.coordinates
        if coords is not None:
            lo, hi = LATITUDE_RANGE
            if not lo <= coords.latitude <= hi:
                errors.append("latitude must be between -90 and 90")
            lo, hi = LONGITUDE_RANGE
            if not lo <= coords.longitude <= hi:
                errors.append("longitude must be between -180 and 180")

        return ValidationResult.from_errors(errors)
