"""Host-facing text boundary.

The embedding application hands over UTF-8 JSON and gets JSON (or a
float) back.  ``validate`` always produces a well-formed result, while
``generate_domain_network`` and ``jaccard_similarity`` raise
:class:`DecodeFailure` when their input cannot be decoded at all.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from ubicity.domain import similarity
from ubicity.domain.experience import (
    describe_decode_error,
    parse_experiences,
    parse_string_list,
)
from ubicity.domain.network import build_network
from ubicity.domain.validation import ExperienceValidator, ValidatorConfig

logger = logging.getLogger(__name__)


class DecodeFailure(ValueError):
    """Input text could not be decoded into the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> DecodeFailure:
        return cls(describe_decode_error(exc))


def new_validator(strict_mode: bool = False) -> ExperienceValidator:
    """Create a validator handle configured with *strict_mode*."""
    return ExperienceValidator(ValidatorConfig(strict_mode=strict_mode))


def validate(handle: ExperienceValidator, experience_text: str | bytes) -> str:
    """Validate one experience and return the result as JSON text."""
    return handle.validate(experience_text).model_dump_json()


def generate_domain_network(experiences_text: str | bytes) -> str:
    """Build the domain network for a JSON array of experiences.

    Raises:
        DecodeFailure: If the text is not an array of experiences.
    """
    try:
        experiences = parse_experiences(experiences_text)
    except ValidationError as exc:
        logger.debug("Experience batch decode failed", exc_info=True)
        raise DecodeFailure.from_validation_error(exc) from exc
    return build_network(experiences).model_dump_json()


def jaccard_similarity(set_a_text: str | bytes, set_b_text: str | bytes) -> float:
    """Score two JSON string arrays.

    Raises:
        DecodeFailure: If either side is not an array of strings.
    """
    try:
        set_a = parse_string_list(set_a_text)
        set_b = parse_string_list(set_b_text)
    except ValidationError as exc:
        raise DecodeFailure.from_validation_error(exc) from exc
    return similarity.jaccard_similarity(set_a, set_b)
