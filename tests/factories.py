"""
Test doubles and factories shared by the test suite.

Provides:
    - FakeTickTick: fake upstream API behind ``httpx.MockTransport``
    - ArgumentFactory: minimal valid arguments for any tool
    - REGISTRY / ALL_TOOLS: the catalogue, available at collection time
"""

from __future__ import annotations

import json
import types as pytypes
from dataclasses import dataclass
from typing import Any, List, Literal, Union, get_args, get_origin

import httpx
from pydantic import BaseModel

from ticktick_open_mcp.tools import ToolSpec, build_registry

BASE_URL = "https://api.ticktick.test/open/v1"
BASE_PATH = "/open/v1"
TEST_TOKEN = "test-token"

REGISTRY = build_registry()
ALL_TOOLS = REGISTRY.names


# =============================================================================
# Fake Upstream
# =============================================================================


@dataclass
class RecordedCall:
    """A request seen by the fake upstream, relative to the API base path."""

    method: str
    path: str
    raw_path: str
    params: dict[str, str]
    body: Any
    headers: httpx.Headers


class FakeTickTick:
    """
    Fake TickTick API behind ``httpx.MockTransport``.

    Every request is recorded. The response defaults to ``200 {}`` and can
    be changed globally with ``respond()`` or made to fail with ``fail_with()``.
    """

    def __init__(self) -> None:
        self.calls: list[RecordedCall] = []
        self.status_code = 200
        self.payload: Any = {}
        self.raw_content: bytes | None = None
        self.error: Exception | None = None

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def respond(self, status_code: int = 200, payload: Any = None, *, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.raw_content = content

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        raw = request.url.raw_path.decode("ascii").split("?", 1)[0]
        self.calls.append(
            RecordedCall(
                method=request.method,
                path=request.url.path.removeprefix(BASE_PATH),
                raw_path=raw.removeprefix(BASE_PATH),
                params=dict(request.url.params),
                body=json.loads(request.content) if request.content else None,
                headers=request.headers,
            )
        )
        if self.error is not None:
            raise self.error
        if self.raw_content is not None:
            return httpx.Response(self.status_code, content=self.raw_content)
        if self.payload is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> RecordedCall:
        assert self.calls, "No request was sent"
        return self.calls[-1]

    def assert_called(self, method: str, path: str) -> RecordedCall:
        call = self.last
        assert (call.method, call.path) == (method, path), f"Expected {method} {path}, got {call.method} {call.path}"
        return call

    def assert_not_called(self) -> None:
        assert not self.calls, f"Unexpected requests: {[(c.method, c.path) for c in self.calls]}"


# =============================================================================
# Argument Factory
# =============================================================================


class ArgumentFactory:
    """Builds minimal valid argument objects from a tool's input model."""

    OVERRIDES: dict[str, Any] = {
        "checkin_stamp": "20250115",
        "after_stamp": "20250101",
        "url": "https://example.com/calendar.ics",
        "email": "someone@example.com",
        "emails": ["someone@example.com"],
        "color": "#F18181",
    }

    @classmethod
    def value(cls, name: str, annotation: Any) -> Any:
        if name in cls.OVERRIDES:
            return cls.OVERRIDES[name]
        origin = get_origin(annotation)
        if origin is Literal:
            return get_args(annotation)[0]
        if origin in (Union, pytypes.UnionType):
            inner = next(a for a in get_args(annotation) if a is not type(None))
            return cls.value(name, inner)
        if origin in (list, List):
            return [cls.value(name, get_args(annotation)[0])]
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            return cls.required(annotation)
        if annotation is bool:
            return True
        if annotation is int:
            return 1
        if annotation is float:
            return 1.0
        return f"{name}-1"

    @classmethod
    def required(cls, model: type[BaseModel]) -> dict[str, Any]:
        return {
            name: cls.value(name, field.annotation)
            for name, field in model.model_fields.items()
            if field.is_required()
        }

    @classmethod
    def for_tool(cls, spec: ToolSpec) -> dict[str, Any]:
        return cls.required(spec.input_model)


def expected_path(spec: ToolSpec, arguments: dict[str, Any]) -> str:
    return spec.path.format(**{name: arguments[name] for name in spec.path_fields})


def required_field_cases() -> list[tuple[str, str]]:
    """(tool name, required field) pairs for every tool."""
    return [
        (spec.name, field)
        for spec in REGISTRY
        for field, info in spec.input_model.model_fields.items()
        if info.is_required()
    ]


def path_field_cases() -> list[tuple[str, str]]:
    """(tool name, path field) pairs for every tool with a templated path."""
    return [(spec.name, field) for spec in REGISTRY for field in spec.path_fields]


READ_AND_DELETE_TOOLS = [spec.name for spec in REGISTRY if spec.method in ("GET", "DELETE")]
