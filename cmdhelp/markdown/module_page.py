"""Module index page writer."""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from cmdhelp.markdown.writer import CommandHelpWriterSettings, dump_yaml
from cmdhelp.schemas import CommandHelp

logger = logging.getLogger(__name__)


class ModulePageWriter:
    """Write the '<Module> Module' page linking every command page."""

    def __init__(self, settings: CommandHelpWriterSettings):
        self.settings = settings

    def render(
        self,
        commands: Sequence[CommandHelp],
        metadata: Optional[Mapping[str, Any]] = None,
        module_name: Optional[str] = None
    ) -> str:
        module_name = module_name or (commands[0].module_name if commands else "")
        lines: List[str] = []

        if metadata:
            lines.extend(["---", dump_yaml(metadata), "---", ""])

        lines.extend([
            f"# {module_name} Module",
            "",
            "## Description",
            "",
            "{{ Fill in the Description }}",
            "",
            f"## {module_name} Cmdlets",
            "",
        ])

        for command_help in commands:
            lines.extend([f"### [{command_help.title}]({command_help.title}.md)", ""])
            if command_help.synopsis:
                lines.extend([command_help.synopsis, ""])

        return "\n".join(lines).rstrip("\n") + "\n"

    def write(
        self,
        commands: Sequence[CommandHelp],
        metadata: Optional[Mapping[str, Any]] = None,
        module_name: Optional[str] = None
    ) -> Path:
        """
        Save the module page.

        If the destination is an existing directory the page is written as
        '<Module>.md' inside it.
        """
        content = self.render(commands, metadata, module_name)
        path = Path(self.settings.destination_path)
        if path.is_dir():
            name = module_name or (commands[0].module_name if commands else "module")
            path = path / f"{name}.md"

        with open(path, "w", encoding=self.settings.encoding, newline="\n") as f:
            f.write(content)

        logger.info(f"Saved module page to {path} ({len(commands)} commands)")
        return path
