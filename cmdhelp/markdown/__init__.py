"""Markdown writers for command pages and the module index page."""

from .module_page import ModulePageWriter
from .writer import CommandHelpMarkdownWriter, CommandHelpWriterSettings

__all__ = [
    "CommandHelpMarkdownWriter",
    "CommandHelpWriterSettings",
    "ModulePageWriter",
]
