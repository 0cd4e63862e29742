"""Run configuration."""

from dataclasses import dataclass
from typing import Final

CONSOLE_OUTPUT: Final[str] = "console"
"""Output value that selects standard output instead of a file."""

DEFAULT_ENCODING: Final[str] = "utf-8"


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Inputs of one preprocessing run, in processing order."""

    input_files: tuple[str, ...]
    preload_scripts: tuple[str, ...] = ()
    output: str = CONSOLE_OUTPUT
    encoding: str = DEFAULT_ENCODING

    @property
    def writes_to_console(self) -> bool:
        return self.output == CONSOLE_OUTPUT
