"""Generation options."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_NAMESPACE = "BlazorApp.JsInterop"


def default_namespace() -> str:
    return os.environ.get("JSINTEROP_NAMESPACE", DEFAULT_NAMESPACE)


@dataclass(frozen=True)
class GeneratorConfig:
    """Options threaded into the wrapper emitter.

    Args:
        namespace: C# namespace of the generated classes. Falls back to
            $JSINTEROP_NAMESPACE, then "BlazorApp.JsInterop".
        class_suffix: Appended to the module name to form the class name.
        output_suffix: Extension of the generated file, written beside the input.
    """

    namespace: str = field(default_factory=default_namespace)
    class_suffix: str = "JsInterop"
    output_suffix: str = ".cs"

    def __post_init__(self):
        if not self.namespace or not all(
            part.isidentifier() for part in self.namespace.split(".")
        ):
            raise ValueError(f"Invalid namespace: {self.namespace!r}")
