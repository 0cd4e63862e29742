"""Macros, marked blocks and expansion."""

from luatp.macros.arguments import ArgumentMatcher, MacroArgument, match_arguments
from luatp.macros.expander import Expander, expand
from luatp.macros.registry import (
    PARAMETER_KINDS,
    RAW,
    VARIADIC_SUFFIX,
    BlockHandle,
    MacroDefinition,
    MacroRegistry,
    MarkedBlockRegistry,
    parse_parameter_specs,
)

__all__ = [
    "PARAMETER_KINDS",
    "RAW",
    "VARIADIC_SUFFIX",
    "ArgumentMatcher",
    "BlockHandle",
    "Expander",
    "MacroArgument",
    "MacroDefinition",
    "MacroRegistry",
    "MarkedBlockRegistry",
    "expand",
    "match_arguments",
    "parse_parameter_specs",
]
