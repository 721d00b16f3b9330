"""Data models for signature extraction and wrapper generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class ParameterDescriptor:
    """A single parsed JavaScript parameter."""

    name: str
    type: str = "object"  # C# type token
    is_optional: bool = False
    default_value: str | None = None  # Raw JS literal, e.g. "5" or "'abc'"

    def __post_init__(self):
        if self.default_value is not None and not self.is_optional:
            raise ValueError(
                f"Parameter '{self.name}' has a default value but is not optional"
            )


@dataclass(frozen=True)
class FunctionDescriptor:
    """A documented JavaScript function ready for rendering."""

    name: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    return_type: str = "void"  # "void", "bool", "Task<double>", ...
    is_async: bool = False
    documentation_lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class ModuleDescriptor:
    """All accepted functions of one JavaScript file."""

    module_name: str  # "UserProfile" for user-profile.js
    source_path: str
    functions: tuple[FunctionDescriptor, ...] = ()


@dataclass(frozen=True)
class DocumentationBlock:
    """Types recovered from a /** ... */ block."""

    parameter_types: dict[str, str] = field(default_factory=dict)  # name -> JS type
    return_type: str | None = None

    @property
    def has_tags(self) -> bool:
        return bool(self.parameter_types) or bool(self.return_type)


@dataclass(frozen=True)
class CandidateDeclaration:
    """A raw match produced by the scanner, before validation."""

    name: str
    raw_parameters: str
    raw_return_type: str  # "" when no annotation
    offset: int
    end: int
    is_async: bool = False
    kind: str = "function"  # "function" | "arrow"


@dataclass(frozen=True)
class Accepted:
    function: FunctionDescriptor


@dataclass(frozen=True)
class Rejected:
    name: str
    reason: str
    offset: int = 0


Outcome = Union[Accepted, Rejected]


@dataclass
class ExtractionResult:
    """Results from extracting one source file."""

    module: ModuleDescriptor
    rejected: list[Rejected] = field(default_factory=list)
