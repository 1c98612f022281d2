"""Tests for human and JSON result formatting."""

from __future__ import annotations

import json

from envshape.output.formatters import format_result
from envshape.services.result import ServiceError, ServiceResult


def _check_result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="check",
        data={"schema": "app:Config", "config": {"port": 3000, "hosts": ["a", "b"]}},
    )


class TestFormatResult:
    def test_json(self) -> None:
        payload = json.loads(format_result(_check_result(), json_output=True))
        assert payload["ok"] is True
        assert payload["data"]["config"]["port"] == 3000

    def test_check_human(self) -> None:
        output = format_result(_check_result())
        assert output.startswith("OK")
        assert "check" in output
        assert "schema: app:Config" in output
        assert "port: 3000" in output
        assert 'hosts: ["a","b"]' in output

    def test_fields_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="fields",
            data={
                "schema": "app:Config",
                "items": [
                    {"name": "port", "env_var": "APP_PORT", "kind": "number", "present": True},
                    {"name": "host", "env_var": None, "kind": "string", "present": False},
                ],
            },
        )
        output = format_result(result)
        assert "Field" in output
        assert "APP_PORT" in output
        assert "number" in output
        assert "host" in output

    def test_generic_op(self) -> None:
        output = format_result(ServiceResult(ok=True, op="other", data={"count": 2}))
        assert "count: 2" in output

    def test_error_lists_entries(self) -> None:
        result = ServiceResult(
            ok=False,
            op="check",
            error=ServiceError(
                code="VALIDATION_FAILED",
                message="1 validation error(s) for AppConfig",
                detail={"errors": [{"loc": "port", "type": "missing", "msg": "Field required"}]},
            ),
        )
        output = format_result(result)
        assert output.startswith("ERROR")
        assert "[VALIDATION_FAILED]" in output
        assert "port: Field required" in output
