"""Capabilities the preprocessor needs from an embedded scripting runtime."""

from collections.abc import Callable, Sequence
from typing import Protocol, TypeAlias

ScriptArgument: TypeAlias = str | int | list[str]


class ScriptError(Exception):
    """A script failed, either inside the runtime or in a native function's argument checks."""


class ScriptRuntime(Protocol):
    """Opaque scripting engine.

    Callback handles are whatever the runtime hands to native functions;
    the preprocessor only stores them and passes them back to `call`.
    """

    def execute(self, source: str) -> None: ...

    def call(self, callback: object, arguments: Sequence[ScriptArgument] = ()) -> object: ...

    def register_native(self, name: str, function: Callable[..., object]) -> None: ...

    def set_global(self, name: str, value: object) -> None: ...

    def get_global(self, name: str) -> object: ...

    def is_callable(self, value: object) -> bool: ...

    def to_text(self, value: object) -> str:
        """String coercion used when scripts pass text: strings and numbers only."""
        ...

    def stringify(self, value: object) -> str:
        """The runtime's own `tostring` rendering of any value."""
        ...

    def to_string_list(self, value: object) -> list[str] | None:
        """Sequence values of a list-like runtime value, or None if it is not one."""
        ...
