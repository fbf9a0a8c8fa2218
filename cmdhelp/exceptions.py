"""
Exceptions raised while loading, converting and writing command help.

Conversion errors are fatal to the single command being converted; batch
callers (see cmdhelp.pipeline) catch them per command.
"""

from pathlib import Path
from typing import Optional


class CmdHelpError(Exception):
    """Base class for all cmdhelp errors."""


class MalformedCommandTitleError(CmdHelpError, ValueError):
    """A command title has no '-' so verb and noun cannot be derived."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Command title '{title}' is not in Verb-Noun form")


class TypeResolutionError(CmdHelpError, KeyError):
    """A syntax parameter has no entry in the command's resolved type map."""

    def __init__(self, parameter_name: str, command_name: Optional[str] = None):
        self.parameter_name = parameter_name
        self.command_name = command_name
        super().__init__(parameter_name)

    def __str__(self) -> str:
        where = f" in {self.command_name}" if self.command_name else ""
        return f"No resolved type for parameter '{self.parameter_name}'{where}"


class HelpModelLoadError(CmdHelpError):
    """A Help Model document could not be read or validated."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Cannot load help model from {self.path}: {reason}")


class OutputPathError(CmdHelpError):
    """The output folder exists but is not a directory."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Output path is not a folder: {self.path}")
