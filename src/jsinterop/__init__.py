"""jsinterop - C# Blazor interop wrappers generated from documented JavaScript."""

from jsinterop.config import GeneratorConfig
from jsinterop.errors import JsInteropError, OutputWriteError, SourceReadError
from jsinterop.generators import generate_wrapper
from jsinterop.models import (
    Accepted,
    ExtractionResult,
    FunctionDescriptor,
    ModuleDescriptor,
    ParameterDescriptor,
    Rejected,
)
from jsinterop.types import map_type
from jsinterop.validators import parse_module

__all__ = [
    "Accepted",
    "ExtractionResult",
    "FunctionDescriptor",
    "GeneratorConfig",
    "JsInteropError",
    "ModuleDescriptor",
    "OutputWriteError",
    "ParameterDescriptor",
    "Rejected",
    "SourceReadError",
    "generate_wrapper",
    "map_type",
    "parse_module",
]
