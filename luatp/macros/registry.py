"""Run-wide registries for macros and marked blocks."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Final

from luatp.diagnostics import (
    BLOCK_DUPLICATE_NAME,
    BLOCK_NOT_FOUND,
    MACRO_DUPLICATE_NAME,
    MACRO_INVALID_NAME,
    MACRO_INVALID_PARAMETER_KIND,
    MACRO_VARIADIC_NOT_LAST,
    PreprocessError,
)
from luatp.lexer.tokens import Token
from luatp.text import SourceLocation, escape_for_display

LOG = logging.getLogger(__name__)

RAW: Final[str] = "raw"
VARIADIC_SUFFIX: Final[str] = "*"
PARAMETER_KINDS: Final[frozenset[str]] = frozenset({RAW})


@dataclass(frozen=True, slots=True)
class MacroDefinition:
    name: str
    parameters: tuple[str, ...]
    variadic: bool
    callback: object

    @property
    def arity(self) -> int:
        return len(self.parameters)


def parse_parameter_specs(
    name: str,
    specs: Sequence[str],
    location: SourceLocation | None = None,
) -> tuple[tuple[str, ...], bool]:
    """Validate a parameter list such as `("raw", "raw*")`.

    Returns the parameter kinds and whether the last one is variadic.
    """
    kinds: list[str] = []
    variadic = False
    for index, spec in enumerate(specs, start=1):
        is_last = index == len(specs)
        marked = spec.endswith(VARIADIC_SUFFIX)
        kind = spec[: -len(VARIADIC_SUFFIX)] if marked else spec
        if marked and not is_last:
            raise PreprocessError.from_spec(
                MACRO_VARIADIC_NOT_LAST,
                f" (macro [{name}], argument {index})",
                location,
            )
        if kind not in PARAMETER_KINDS:
            raise PreprocessError.from_spec(
                MACRO_INVALID_PARAMETER_KIND,
                f" but found [{escape_for_display(kind)}] (macro [{name}], argument {index})",
                location,
            )
        kinds.append(kind)
        variadic = variadic or marked
    return tuple(kinds), variadic


class MacroRegistry:
    """Macro name -> definition. Names are unique for the whole run."""

    def __init__(self) -> None:
        self._macros: dict[str, MacroDefinition] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._macros

    def __len__(self) -> int:
        return len(self._macros)

    def __iter__(self) -> Iterator[MacroDefinition]:
        return iter(self._macros.values())

    def get(self, name: str) -> MacroDefinition | None:
        return self._macros.get(name)

    def register(self, definition: MacroDefinition, location: SourceLocation | None = None) -> MacroDefinition:
        if not definition.name:
            raise PreprocessError.from_spec(MACRO_INVALID_NAME, location=location)
        if definition.name in self._macros:
            raise PreprocessError.from_spec(MACRO_DUPLICATE_NAME, f" [{definition.name}]", location)
        self._macros[definition.name] = definition
        LOG.debug(
            "Registered macro %s (%d parameters%s)",
            definition.name,
            definition.arity,
            ", variadic" if definition.variadic else "",
        )
        return definition

    def define(
        self,
        name: str,
        specs: Sequence[str],
        callback: object,
        location: SourceLocation | None = None,
    ) -> MacroDefinition:
        """Validate and register a macro in one step."""
        if name in self._macros:
            raise PreprocessError.from_spec(MACRO_DUPLICATE_NAME, f" [{name}]", location)
        parameters, variadic = parse_parameter_specs(name, specs, location)
        return self.register(MacroDefinition(name, parameters, variadic, callback), location)


class BlockHandle:
    """Non-owning handle to a token that scripts write into."""

    __slots__ = ("_ref", "_location")

    def __init__(self, token: Token) -> None:
        self._ref = weakref.ref(token)
        self._location = token.location

    @property
    def token(self) -> Token | None:
        return self._ref()

    @property
    def is_alive(self) -> bool:
        return self._ref() is not None

    @property
    def location(self) -> SourceLocation:
        """Where the token was lexed; kept after the token is gone."""
        return self._location

    def write(self, text: str) -> None:
        """Append `text` to the token; a no-op once its file has been rendered."""
        token = self._ref()
        if token is None:
            LOG.debug("Dropped write to expired block from %s", self._location)
            return
        token.append(text)

    def __repr__(self) -> str:
        state = "alive" if self.is_alive else "expired"
        return f"BlockHandle({self._location}, {state})"


class MarkedBlockRegistry:
    """Block name -> handle. A name can be marked once per run."""

    def __init__(self) -> None:
        self._blocks: dict[str, BlockHandle] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def mark(self, name: str, handle: BlockHandle, location: SourceLocation | None = None) -> None:
        if name in self._blocks:
            raise PreprocessError.from_spec(BLOCK_DUPLICATE_NAME, f" [{name}]", location)
        self._blocks[name] = handle
        LOG.debug("Marked block %s at %s", name, handle.location)

    def get(self, name: str, location: SourceLocation | None = None) -> BlockHandle:
        handle = self._blocks.get(name)
        if handle is None:
            raise PreprocessError.from_spec(BLOCK_NOT_FOUND, f" [{name}]", location)
        return handle
