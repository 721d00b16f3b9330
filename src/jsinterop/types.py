"""JavaScript to C# type mapping."""

from __future__ import annotations

# Keys are lowercase; lookup is case-insensitive
TYPE_MAP = {
    "string": "string",
    "number": "double",
    "boolean": "bool",
    "object": "object",
    "array": "object[]",
    "void": "void",
    "promise": "Task",
    "": "void",
}

FALLBACK_TYPE = "object"


def map_type(js_type: str | None) -> str:
    """Map a JS/JSDoc type token to a C# type token.

    Never raises: unknown tokens map to ``object``.

    Examples:
        map_type("number")                    -> "double"
        map_type("Promise<string>")           -> "Task<string>"
        map_type("Promise<void>")             -> "Task"
        map_type("Promise<Promise<string>>")  -> "Task<Task<string>>"
    """
    js_type = (js_type or "").strip()

    if js_type.startswith("Promise<") and js_type.endswith(">"):
        inner = map_type(js_type[len("Promise<") : -1])
        return "Task" if inner == "void" else f"Task<{inner}>"

    return TYPE_MAP.get(js_type.lower(), FALLBACK_TYPE)


def is_void_like(cs_type: str) -> bool:
    """True for return types rendered without a result (void, Task)."""
    return cs_type in ("void", "Task")


def unwrap_task(cs_type: str) -> str:
    """Strip one Task<...> layer; Task itself unwraps to void."""
    if cs_type == "Task":
        return "void"
    if cs_type.startswith("Task<") and cs_type.endswith(">"):
        return cs_type[len("Task<") : -1]
    return cs_type
