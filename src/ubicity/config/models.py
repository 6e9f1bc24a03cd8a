"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults baked here, ubicity.toml only contains
overrides.  ``[validator]`` and ``[privacy]`` reuse the domain-layer
option models so the domain code reads its options directly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ubicity.domain.privacy import PrivacyConfig
from ubicity.domain.validation import ValidatorConfig

__all__ = ["PrivacyConfig", "RecommendConfig", "TemporalConfig", "ValidatorConfig"]


class RecommendConfig(BaseModel):
    """[recommend] section."""

    model_config = {"frozen": True}

    top: int = 5


class TemporalConfig(BaseModel):
    """[temporal] section."""

    model_config = {"frozen": True}

    streak_min_days: int = Field(default=3, ge=1)
