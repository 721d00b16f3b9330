"""C# wrapper generation for Blazor JS interop."""

from __future__ import annotations

from pathlib import PurePath
from xml.sax.saxutils import escape

from .config import GeneratorConfig
from .models import FunctionDescriptor, ModuleDescriptor, ParameterDescriptor
from .naming import escape_identifier, to_pascal_case
from .params import render_default
from .types import is_void_like, unwrap_task

INDENT = "    "


def class_name_for(module: ModuleDescriptor, config: GeneratorConfig) -> str:
    return f"{module.module_name}{config.class_suffix}"


def method_name_for(function: FunctionDescriptor) -> str:
    """``get_user`` -> ``GetUserAsync``."""
    return f"{to_pascal_case(function.name)}Async"


def method_return_type(function: FunctionDescriptor) -> str:
    """Result type of the generated method, without the outer Task.

    The wrapper is asynchronous already, so a ``Task<T>`` return is
    unwrapped to ``T``; ``Task`` and ``void`` both give ``void``.
    """
    return_type = unwrap_task(function.return_type)
    return "void" if is_void_like(return_type) else return_type


def _render_parameter(param: ParameterDescriptor) -> str:
    param_type = param.type
    if param.is_optional and not param_type.endswith("?"):
        param_type += "?"
    rendered = f"{param_type} {escape_identifier(param.name)}"
    if param.is_optional:
        default = (
            render_default(param.default_value)
            if param.default_value is not None
            else "null"
        )
        rendered += f" = {default}"
    return rendered


def _generate_method(function: FunctionDescriptor) -> list[str]:
    lines = []

    if function.documentation_lines:
        lines.append(f"{INDENT}/// <summary>")
        for comment in function.documentation_lines:
            lines.append(f"{INDENT}/// {escape(comment)}")
        lines.append(f"{INDENT}/// </summary>")

    for param in function.parameters:
        lines.append(
            f'{INDENT}/// <param name="{param.name}">'
            f"JavaScript parameter of type {escape(param.type)}</param>"
        )

    return_type = method_return_type(function)
    is_void = return_type == "void"
    task_type = "Task" if is_void else f"Task<{return_type}>"
    parameters = ", ".join(_render_parameter(p) for p in function.parameters)

    lines.append(
        f"{INDENT}public async {task_type} {method_name_for(function)}({parameters})"
    )
    lines.append(f"{INDENT}{{")

    arguments = "".join(
        f", {escape_identifier(p.name)}" for p in function.parameters
    )
    if is_void:
        lines.append(
            f'{INDENT * 2}await _jsRuntime.InvokeVoidAsync("{function.name}", '
            f"_modulePath{arguments});"
        )
    else:
        lines.append(
            f"{INDENT * 2}return await _jsRuntime.InvokeAsync<{return_type}>"
            f'("{function.name}", _modulePath{arguments});'
        )

    lines.append(f"{INDENT}}}")
    return lines


def generate_wrapper(
    module: ModuleDescriptor, config: GeneratorConfig | None = None
) -> str:
    """Render the C# wrapper class for one JavaScript module."""
    config = config or GeneratorConfig()
    class_name = class_name_for(module, config)
    default_path = f"./{PurePath(module.source_path).name}"

    lines = [
        "using Microsoft.JSInterop;",
        "",
        f"namespace {config.namespace};",
        "",
        f"public class {class_name}",
        "{",
        f"{INDENT}private readonly IJSRuntime _jsRuntime;",
        f"{INDENT}private readonly string _modulePath;",
        "",
        f'{INDENT}public {class_name}(IJSRuntime jsRuntime, string modulePath = "{default_path}")',
        f"{INDENT}{{",
        f"{INDENT * 2}_jsRuntime = jsRuntime;",
        f"{INDENT * 2}_modulePath = modulePath;",
        f"{INDENT}}}",
        "",
    ]

    for function in module.functions:
        lines.extend(_generate_method(function))
        lines.append("")

    lines.append("}")
    lines.append("")

    return "\n".join(lines)
