"""Parameter list parsing and default value rendering."""

from __future__ import annotations

import re

from .models import DocumentationBlock, ParameterDescriptor
from .types import FALLBACK_TYPE, map_type

_OPTIONAL_NAME = re.compile(r"^(\s*[\w$]+)\s*\?")
_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def parse_parameter(
    segment: str, doc: DocumentationBlock | None = None
) -> ParameterDescriptor:
    """Parse one parameter such as ``count?: number`` or ``flag = true``."""
    text = segment.strip()
    is_optional = False
    default_value = None

    optional_match = _OPTIONAL_NAME.match(text)
    if optional_match:
        is_optional = True
        text = optional_match.group(1) + text[optional_match.end() :]

    if "=" in text:
        text, _, raw_default = text.partition("=")
        default_value = raw_default.strip()
        is_optional = True

    if ":" in text:
        name, _, annotation = text.partition(":")
        name = name.strip()
        param_type = map_type(annotation)
    else:
        name = text.strip()
        doc_type = doc.parameter_types.get(name) if doc else None
        param_type = map_type(doc_type) if doc_type else FALLBACK_TYPE

    return ParameterDescriptor(
        name=name,
        type=param_type,
        is_optional=is_optional,
        default_value=default_value,
    )


def parse_parameters(
    raw: str, doc: DocumentationBlock | None = None
) -> list[ParameterDescriptor]:
    """Split a raw parameter list into descriptors, in declaration order.

    Commas are split at every position: a type such as ``Map<string, number>``
    is not supported.
    """
    if not raw or not raw.strip():
        return []
    return [
        parse_parameter(segment, doc) for segment in raw.split(",") if segment.strip()
    ]


def render_default(js_default: str) -> str:
    """Convert a JS default literal to C#; unknown expressions become null."""
    value = js_default.strip()
    if value in ("true", "false", "null"):
        return value
    if value == "undefined":
        return "null"
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        inner = value[1:-1].replace('\\"', '"').replace('"', '\\"')
        return f'"{inner}"'
    if _NUMBER.match(value):
        return value
    return "null"
