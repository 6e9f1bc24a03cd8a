"""Tests for format_result, OutputSettings, and the Rich renderers."""

import json

from ubicity.output.formatters import OutputSettings, format_result
from ubicity.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="NOT_FOUND", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestJsonMode:
    def test_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("network", node_count=2), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "network"
        assert data["data"]["node_count"] == 2

    def test_error(self) -> None:
        output = format_result(_err("network", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["ok"] is True


class TestQuietMode:
    def test_validate(self) -> None:
        quiet = OutputSettings(quiet=True)
        assert format_result(_ok("validate", valid=True, errors=[]), settings=quiet) == "valid"
        invalid = _ok("validate", valid=False, errors=["x"])
        assert format_result(invalid, settings=quiet) == "invalid"

    def test_similarity_score(self) -> None:
        result = _ok("similarity", score=0.5, shared=["a"])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "0.5"

    def test_items_ids(self) -> None:
        result = _ok("hubs", count=2, items=[{"id": "math"}, {"id": "art"}])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "math\nart"

    def test_network_node_ids(self) -> None:
        result = _ok("network", nodes=[{"id": "a", "size": 1}], edges=[])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "a"

    def test_count_when_rows_have_no_id(self) -> None:
        result = _ok("streaks", count=1, items=[{"start": "a", "end": "b", "days": 3}])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "1"

    def test_empty_items_report_zero(self) -> None:
        result = _ok("collaborators", count=0, items=[])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "0"

    def test_error(self) -> None:
        output = format_result(_err("hubs", "boom"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: hubs: boom"


class TestHumanMode:
    def test_default_settings(self) -> None:
        assert format_result(_ok("anything", key="value")).startswith("OK")

    def test_generic(self) -> None:
        output = format_result(_ok("anything", key="value", nested={"a": 1}))
        assert "anything" in output
        assert "key: value" in output
        assert 'nested: {"a":1}' in output

    def test_validate_invalid(self) -> None:
        output = format_result(_ok("validate", valid=False, errors=["id is required"]))
        assert "invalid" in output
        assert "- id is required" in output

    def test_validate_batch(self) -> None:
        result = _ok(
            "validate_batch",
            count=2,
            valid_count=1,
            invalid_count=1,
            items=[
                {"index": 0, "valid": True, "errors": []},
                {"index": 1, "valid": False, "errors": ["id is required"]},
            ],
        )
        output = format_result(result)
        assert "invalid_count: 1" in output
        assert "[1] id is required" in output

    def test_network_tables(self) -> None:
        result = _ok(
            "network",
            node_count=2,
            edge_count=1,
            nodes=[{"id": "math", "size": 1}, {"id": "physics", "size": 1}],
            edges=[{"source": "math", "target": "physics", "weight": 1}],
        )
        output = format_result(result)
        assert "Domains" in output
        assert "Co-occurrences" in output
        assert "physics" in output

    def test_similarity(self) -> None:
        output = format_result(_ok("similarity", score=1 / 3, shared=["b"]))
        assert "0.3333" in output

    def test_empty_items(self) -> None:
        output = format_result(_ok("similar_learners", count=0, items=[]))
        assert "(no results)" in output

    def test_verbose_meta(self) -> None:
        result = ServiceResult(
            ok=True, op="validate", data={"valid": True}, meta={"strict_mode": True}
        )
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert "strict_mode: True" in output

    def test_error(self) -> None:
        output = format_result(_err("network", "Parse error: x"))
        assert output.startswith("ERROR")
        assert "Parse error: x" in output

    def test_collaboration_tables(self) -> None:
        result = _ok(
            "collaboration",
            node_count=2,
            edge_count=1,
            nodes=[{"id": "ada", "size": 2}, {"id": "bob", "size": 0}],
            edges=[{"source": "ada", "target": "bob", "weight": 2}],
        )
        output = format_result(result)
        assert "Learners" in output
        assert "Collaborations" in output
        assert "experiences" in output

    def test_streaks_table(self) -> None:
        result = _ok(
            "streaks",
            count=1,
            items=[
                {
                    "start": "2025-03-01T10:00:00Z",
                    "end": "2025-03-03T09:00:00Z",
                    "days": 3,
                    "experiences": 4,
                }
            ],
        )
        output = format_result(result)
        assert "Streaks" in output
        assert "2025-03-01T10:00:00Z" in output

    def test_anonymize_table(self) -> None:
        record = {
            "id": "e1",
            "timestamp": "2025-03-01T10:00:00Z",
            "learner": {"id": "anon-1234abcd"},
            "context": {"location": {"name": "Library"}},
            "experience": {"type": "observation", "description": "x"},
        }
        output = format_result(_ok("anonymize", count=1, items=[record]))
        assert "Anonymized records" in output
        assert "anon-1234abcd" in output
