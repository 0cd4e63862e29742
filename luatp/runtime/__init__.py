"""Scripting runtime bridge."""

from luatp.runtime.interface import ScriptArgument, ScriptError, ScriptRuntime
from luatp.runtime.lua import LuaScriptRuntime
from luatp.runtime.natives import CURRENT_BLOCK_GLOBAL, NativeFunctions, install_natives

__all__ = [
    "CURRENT_BLOCK_GLOBAL",
    "LuaScriptRuntime",
    "NativeFunctions",
    "ScriptArgument",
    "ScriptError",
    "ScriptRuntime",
    "install_natives",
]
