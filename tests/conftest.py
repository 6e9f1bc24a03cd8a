"""Shared pytest fixtures and test helpers for ubicity tests."""

from __future__ import annotations

import json
import os
from typing import Any

import pytest
from click.testing import CliRunner

from ubicity.domain.experience import Experience, parse_experience


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_config_discovery(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep a stray ubicity.toml or UBICITY_* variable from leaking into tests."""
    for name in list(os.environ):
        if name.startswith("UBICITY_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


# ---------------------------------------------------------------------------
# Record builders (used across test modules)
# ---------------------------------------------------------------------------


def experience_payload(
    exp_id: str = "exp-001",
    *,
    learner_id: str = "learner-001",
    location: str = "Central Library",
    domains: list[str] | None = None,
    coordinates: dict[str, float] | None = None,
    timestamp: str = "2025-03-01T10:00:00Z",
    connections: list[str] | None = None,
) -> dict[str, Any]:
    """Build a valid experience as a plain JSON-ready dict."""
    loc: dict[str, Any] = {"name": location}
    if coordinates is not None:
        loc["coordinates"] = coordinates
    context: dict[str, Any] = {"location": loc}
    if connections is not None:
        context["connections"] = connections
    detail: dict[str, Any] = {"type": "observation", "description": "Watched a robotics demo"}
    if domains is not None:
        detail["domains"] = domains
    return {
        "id": exp_id,
        "timestamp": timestamp,
        "learner": {"id": learner_id},
        "context": context,
        "experience": detail,
    }


def make_experience(exp_id: str = "exp-001", **kwargs: Any) -> Experience:
    """Build a decoded Experience via the JSON path."""
    return parse_experience(json.dumps(experience_payload(exp_id, **kwargs)))


def batch_json(*payloads: dict[str, Any]) -> str:
    return json.dumps(list(payloads))
