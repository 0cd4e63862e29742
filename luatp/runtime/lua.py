"""Lua runtime adapter built on lupa.

The Lua 5.1 dialect is pinned so existing macro scripts keep working (`unpack`,
`loadstring`, integral numbers printed without a fraction).
"""

from collections.abc import Callable, Sequence

from lupa import lua51

from luatp.runtime.interface import ScriptArgument, ScriptError


class LuaScriptRuntime:
    """One Lua state shared by every preload script and input file of a run."""

    def __init__(self) -> None:
        self._lua = lua51.LuaRuntime(register_eval=False, register_builtins=False)
        self._globals = self._lua.globals()
        self._tostring = self._globals.tostring

    @property
    def lua(self) -> lua51.LuaRuntime:
        return self._lua

    def execute(self, source: str) -> None:
        try:
            self._lua.execute(source)
        except lua51.LuaError as exc:
            raise ScriptError(str(exc)) from exc

    def call(self, callback: object, arguments: Sequence[ScriptArgument] = ()) -> object:
        if not self.is_callable(callback):
            raise ScriptError(f"attempt to call a {self._type_name(callback)} value")
        values = [self._lua.table_from(arg) if isinstance(arg, list) else arg for arg in arguments]
        try:
            return callback(*values)
        except lua51.LuaError as exc:
            raise ScriptError(str(exc)) from exc

    def register_native(self, name: str, function: Callable[..., object]) -> None:
        self._globals[name] = function

    def set_global(self, name: str, value: object) -> None:
        self._globals[name] = value

    def get_global(self, name: str) -> object:
        return self._globals[name]

    def is_callable(self, value: object) -> bool:
        kind = lua51.lua_type(value)
        if kind is None:
            return callable(value)
        return kind == "function"

    def to_text(self, value: object) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        if isinstance(value, bool):
            return ""
        if isinstance(value, (int, float)):
            return self._tostring(value)
        return ""

    def stringify(self, value: object) -> str:
        text = self._tostring(value)
        if isinstance(text, bytes):
            return text.decode("utf-8", errors="replace")
        return text

    def to_string_list(self, value: object) -> list[str] | None:
        if lua51.lua_type(value) == "table":
            return [self.stringify(value[index]) for index in range(1, len(value) + 1)]
        if isinstance(value, (list, tuple)):
            return [self.stringify(item) for item in value]
        return None

    def _type_name(self, value: object) -> str:
        kind = lua51.lua_type(value)
        if kind is not None:
            return kind
        return "nil" if value is None else type(value).__name__
