"""In-test scripting runtime: scripts and callbacks are plain Python callables."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from luatp.runtime import ScriptArgument, ScriptError


class FakeRuntime:
    """Runs registered Python actions in place of script source.

    `execute(source)` looks up the stripped source in `scripts`; a callback
    raising RuntimeError is reported as a script error.
    """

    def __init__(self) -> None:
        self.globals: dict[str, object] = {}
        self.scripts: dict[str, Callable[[FakeRuntime], None]] = {}
        self.executed: list[str] = []
        self.calls: list[tuple[object, list[ScriptArgument]]] = []

    def native(self, name: str) -> Callable[..., object]:
        function = self.globals[name]
        assert callable(function)
        return function

    def execute(self, source: str) -> None:
        self.executed.append(source)
        action = self.scripts.get(source.strip())
        if action is None:
            return
        try:
            action(self)
        except RuntimeError as exc:
            raise ScriptError(str(exc)) from exc

    def call(self, callback: object, arguments: Sequence[ScriptArgument] = ()) -> object:
        assert callable(callback)
        self.calls.append((callback, list(arguments)))
        try:
            return callback(*arguments)
        except RuntimeError as exc:
            raise ScriptError(str(exc)) from exc

    def register_native(self, name: str, function: Callable[..., object]) -> None:
        self.globals[name] = function

    def set_global(self, name: str, value: object) -> None:
        self.globals[name] = value

    def get_global(self, name: str) -> object:
        return self.globals.get(name)

    def is_callable(self, value: object) -> bool:
        return callable(value)

    def to_text(self, value: object) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return ""

    def stringify(self, value: object) -> str:
        return "nil" if value is None else str(value)

    def to_string_list(self, value: object) -> list[str] | None:
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return None
