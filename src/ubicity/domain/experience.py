"""Experience records — the shared wire model.

Field names map 1:1 to the JSON keys exchanged with the host, including
the literal ``type`` key on :class:`ExperienceData`.  Models are strict:
a number where a string is expected (or vice versa) is a decode failure,
while empty strings decode fine and are left to the validator.  Non-finite
numbers (``NaN``, ``Infinity``) are rejected at decode time.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter, ValidationError


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True, allow_inf_nan=False)


class Coordinates(_WireModel):
    """Geographic point; range checks live in the validator."""

    latitude: float
    longitude: float


class Location(_WireModel):
    name: str
    coordinates: Coordinates | None = None


class Context(_WireModel):
    location: Location
    connections: list[str] | None = None


class Learner(_WireModel):
    id: str


class ExperienceData(_WireModel):
    """What happened during the experience."""

    type: str
    description: str
    domains: list[str] | None = None


class Experience(_WireModel):
    """A single learning experience record.

    Attributes:
        id: Record identity.
        timestamp: Free-form timestamp string (format not checked).
        learner: Who had the experience.
        context: Where it happened.
        experience: What it was about, including its domain tags.
    """

    id: str
    timestamp: str
    learner: Learner
    context: Context
    experience: ExperienceData


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

_EXPERIENCE_LIST: TypeAdapter[list[Experience]] = TypeAdapter(list[Experience])
_STRING_LIST: TypeAdapter[list[StrictStr]] = TypeAdapter(list[StrictStr])


def parse_experience(raw: str | bytes) -> Experience:
    """Decode one UTF-8 JSON object into an Experience.

    Raises:
        pydantic.ValidationError: If the text is not JSON or does not
            match the Experience shape.
    """
    return Experience.model_validate_json(raw)


def parse_experiences(raw: str | bytes) -> list[Experience]:
    """Decode a JSON array of Experience objects."""
    return _EXPERIENCE_LIST.validate_json(raw)


def parse_string_list(raw: str | bytes) -> list[str]:
    """Decode a JSON array of strings."""
    return _STRING_LIST.validate_json(raw)


def describe_decode_error(exc: ValidationError) -> str:
    """Summarize a pydantic decode failure on a single line.

    Examples:
        ``learner: Field required``
        ``experience.type: Input should be a valid string``
    """
    parts: list[str] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)
