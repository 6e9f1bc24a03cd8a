"""Record anonymization for sharing experience data.

Each transform returns a new Experience; inputs are never modified.
Fields outside the record model (names, addresses, free-form extras)
never survive decoding, so they are absent from anonymized output too.
"""

from __future__ import annotations

import hashlib
import math
import re
import uuid
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from ubicity.domain.experience import Coordinates, Experience

IdMode: TypeAlias = Literal["hash", "random", "keep"]

MAX_TEXT_LENGTH = 10_000

_EMAIL = re.compile(r"[\w.-]+@[\w.-]+\.[a-zA-Z]{2,}")
_PHONE = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")
_URL = re.compile(r"https?://\S{1,2000}")
_MET_NAME = re.compile(r"\b(I met|met with|talked to|spoke with)\s+([A-Z][a-z]+)\b")


class PrivacyConfig(BaseModel):
    """Anonymization options.

    Attributes:
        learner_ids: ``hash`` gives a stable pseudonym per learner,
            ``random`` a fresh one per record, ``keep`` leaves ids alone.
        fuzz_radius: Coordinate grid size in degrees (0.01 is roughly
            1 km).  Zero disables fuzzing.
    """

    model_config = ConfigDict(frozen=True)

    learner_ids: IdMode = "hash"
    fuzz_radius: float = Field(default=0.01, ge=0)


def pseudonymize(value: str) -> str:
    """Stable ``anon-`` pseudonym for an identifier."""
    digest = hashlib.sha256(value.encode("utf-8")).hexdigest()
    return f"anon-{digest[:8]}"


def snap(value: float, radius: float) -> float:
    """Snap a coordinate to the nearest multiple of *radius*, half up.

    Examples:
        >>> snap(45.5231, 0.01)
        45.52
        >>> snap(-73.5612, 0.01)
        -73.56
    """
    return round(math.floor(value / radius + 0.5) * radius, 9)


def sanitize_text(text: str) -> str:
    """Mask emails, phone numbers, URLs and names after "I met" style phrases.

    Text past :data:`MAX_TEXT_LENGTH` characters is dropped first.
    """
    text = text[:MAX_TEXT_LENGTH]
    text = _EMAIL.sub("[email]", text)
    text = _PHONE.sub("[phone]", text)
    text = _URL.sub("[url]", text)
    return _MET_NAME.sub(r"\1 [person]", text)


def anonymize_learner(exp: Experience, *, mode: IdMode = "hash") -> Experience:
    if mode == "keep":
        return exp
    if mode == "hash":
        new_id = pseudonymize(exp.learner.id)
    else:
        new_id = f"anon-{uuid.uuid4().hex[:8]}"
    return exp.model_copy(update={"learner": exp.learner.model_copy(update={"id": new_id})})


def anonymize_location(exp: Experience, *, radius: float = 0.01) -> Experience:
    location = exp.context.location
    if radius <= 0 or location.coordinates is None:
        return exp
    coords = Coordinates(
        latitude=snap(location.coordinates.latitude, radius),
        longitude=snap(location.coordinates.longitude, radius),
    )
    context = exp.context.model_copy(
        update={"location": location.model_copy(update={"coordinates": coords})}
    )
    return exp.model_copy(update={"context": context})


def remove_pii(exp: Experience) -> Experience:
    """Replace collaborator names with ``person-N`` and scrub the description."""
    context = exp.context
    if context.connections:
        context = context.model_copy(
            update={
                "connections": [f"person-{i}" for i in range(1, len(context.connections) + 1)]
            }
        )
    detail = exp.experience.model_copy(
        update={"description": sanitize_text(exp.experience.description)}
    )
    return exp.model_copy(update={"context": context, "experience": detail})


def fully_anonymize(exp: Experience, config: PrivacyConfig | None = None) -> Experience:
    """Learner pseudonym, fuzzed coordinates and scrubbed text, in that order."""
    config = config or PrivacyConfig()
    exp = anonymize_learner(exp, mode=config.learner_ids)
    exp = anonymize_location(exp, radius=config.fuzz_radius)
    return remove_pii(exp)
