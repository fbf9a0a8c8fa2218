"""
cmdhelp - Command help conversion for shell help systems.

Renders structured command documentation (the Help Model) as markdown pages
and as legacy MAML XML help consumed by the shell's built-in help engine.

Main Components:
- schemas: Help Model (read-only input)
- maml: Segmenter, example parser, type resolver, tree builder, serializer
- markdown: Command page and module page writers
- pipeline: Batch conversion with per-command failure isolation

Usage:
    from cmdhelp import load_command_help, convert_help_items, write_to_file

    commands = load_command_help("widgets.json")
    write_to_file(convert_help_items(commands), "Widgets-help.xml", "utf-8")
"""

from .schemas import (
    CommandHelp,
    Example,
    InputOutput,
    Link,
    Parameter,
    ParameterSet,
    SyntaxItem,
    SyntaxParameter,
)
from .exceptions import (
    CmdHelpError,
    HelpModelLoadError,
    MalformedCommandTitleError,
    OutputPathError,
    TypeResolutionError,
)
from .loader import load_command_help
from .maml import convert_command_help, convert_help_items, write_to_file

__all__ = [
    # Help Model
    "CommandHelp",
    "Example",
    "InputOutput",
    "Link",
    "Parameter",
    "ParameterSet",
    "SyntaxItem",
    "SyntaxParameter",

    # Errors
    "CmdHelpError",
    "HelpModelLoadError",
    "MalformedCommandTitleError",
    "OutputPathError",
    "TypeResolutionError",

    # Conversion
    "load_command_help",
    "convert_command_help",
    "convert_help_items",
    "write_to_file",
]

__version__ = "0.1.0"
