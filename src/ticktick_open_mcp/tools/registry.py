"""
Tool registry.

Every MCP tool is one ToolSpec: an input model (whose JSON Schema is
advertised to the host), an HTTP request template and a response formatter.
The registry is an ordered, name-keyed collection of specs.
"""

from __future__ import annotations

import json
from string import Formatter as _TemplateParser
from typing import Any, Callable, Iterable, Iterator, Literal, Optional
from urllib.parse import quote

from mcp import types
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ticktick_open_mcp.tools.formatting import Formatter, render_json
from ticktick_open_mcp.tools.inputs import LOCAL_FIELDS, BaseMCPInput, ResponseFormat

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]
BodyBuilder = Callable[[Any], Any]

# httpx would resolve these, sending the request to a parent resource
DOT_SEGMENTS = frozenset({".", ".."})


def camelize(value: Any) -> Any:
    """Recursively convert snake_case dict keys to TickTick's camelCase."""
    if isinstance(value, dict):
        return {to_camel(str(k)): camelize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [camelize(v) for v in value]
    return value


def _query_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class UpstreamRequest(BaseModel):
    """One prepared call against the TickTick API."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str
    params: dict[str, Any] = Field(default_factory=dict)
    body: Any = None


class ToolSpec(BaseModel):
    """Declarative description of one MCP tool."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    title: str
    description: str
    input_model: type[BaseMCPInput]
    method: HttpMethod
    path: str
    query: tuple[str, ...] = ()
    body: Optional[BodyBuilder] = None
    formatter: Formatter

    @model_validator(mode="after")
    def check_fields(self) -> "ToolSpec":
        fields = self.input_model.model_fields
        for name in self.path_fields:
            if name not in fields or not fields[name].is_required():
                raise ValueError(f"{self.name}: path field '{name}' must be a required input field")
        for name in self.query:
            if name not in fields:
                raise ValueError(f"{self.name}: query field '{name}' is not an input field")
        return self

    @property
    def path_fields(self) -> tuple[str, ...]:
        return tuple(field for _, field, _, _ in _TemplateParser().parse(self.path) if field)

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()

    def validate_arguments(self, arguments: dict[str, Any]) -> BaseMCPInput:
        """
        Validate raw tool arguments; raises pydantic.ValidationError.

        Arguments are checked in strict JSON mode, so values must already have
        the types the advertised schema declares ("7" is not an integer).
        Path values that are URL dot segments are rejected.
        """
        params = self.input_model.model_validate_json(json.dumps(arguments), strict=True)
        errors = [
            {
                "type": PydanticCustomError("path_segment", "must not be '.' or '..'"),
                "loc": (name,),
                "input": getattr(params, name),
            }
            for name in self.path_fields
            if str(getattr(params, name)) in DOT_SEGMENTS
        ]
        if errors:
            raise ValidationError.from_exception_data(self.input_model.__name__, errors)
        return params

    def default_body(self, params: BaseMCPInput) -> Any:
        exclude = set(self.path_fields) | set(self.query) | LOCAL_FIELDS
        return camelize(params.model_dump(mode="json", exclude_none=True, exclude=exclude)) or None

    def build_request(self, params: BaseMCPInput) -> UpstreamRequest:
        values = params.model_dump(mode="json")
        path = self.path.format_map({name: quote(str(values[name]), safe="") for name in self.path_fields})
        query = {
            to_camel(name): _query_value(values[name])
            for name in self.query
            if values.get(name) is not None
        }
        body = None
        if self.body is not None:
            body = self.body(params)
        elif self.method in ("POST", "PUT"):
            body = self.default_body(params)
        return UpstreamRequest(method=self.method, path=path, params=query, body=body)

    def render(self, data: Any, params: BaseMCPInput) -> str:
        if params.response_format == ResponseFormat.JSON:
            return render_json(data)
        return self.formatter(data, params)

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.input_schema,
            annotations=types.ToolAnnotations(
                title=self.title,
                readOnlyHint=self.method == "GET",
                destructiveHint=self.method == "DELETE",
                idempotentHint=self.method in ("GET", "PUT", "DELETE"),
                openWorldHint=True,
            ),
        )


class ToolRegistry:
    """Ordered mapping from tool name to ToolSpec."""

    def __init__(self, specs: Iterable[ToolSpec] = ()) -> None:
        self._specs: dict[str, ToolSpec] = {}
        for spec in specs:
            self.register(spec)

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._specs:
            raise ValueError(f"Duplicate tool name: {spec.name}")
        self._specs[spec.name] = spec

    def get(self, name: str) -> ToolSpec | None:
        return self._specs.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    @property
    def names(self) -> list[str]:
        return list(self._specs)
