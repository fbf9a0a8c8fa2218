"""
Markdown command page writer.

Renders one command's Help Model as a human-editable markdown page:

---
<front matter>
---

# Verb-Noun
## SYNOPSIS
## SYNTAX
## ALIASES
## DESCRIPTION
## EXAMPLES
## PARAMETERS
## INPUTS
## OUTPUTS
## NOTES
## RELATED LINKS

Front matter and per-parameter metadata blocks are YAML.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from cmdhelp.maml.converter import unwrap_nullable
from cmdhelp.maml.type_resolver import TypeResolver
from cmdhelp.schemas import CommandHelp, Parameter, SyntaxItem, SyntaxParameter

logger = logging.getLogger(__name__)

COMMON_PARAMETERS_TEXT = (
    "This cmdlet supports the common parameters: -Debug, -ErrorAction, -ErrorVariable, "
    "-InformationAction, -InformationVariable, -OutBuffer, -OutVariable, -PipelineVariable, "
    "-ProgressAction, -Verbose, -WarningAction, and -WarningVariable. For more information, see "
    "[about_CommonParameters](https://go.microsoft.com/fwlink/?LinkID=113216)."
)


@dataclass
class CommandHelpWriterSettings:
    """Where and how a markdown page is written."""
    encoding: str
    destination_path: Path


def dump_yaml(data: Mapping[str, Any]) -> str:
    """Dump a mapping as block-style YAML, keeping key order."""
    return yaml.safe_dump(
        dict(data),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True
    ).rstrip("\n")


def display_type_name(type_name: str) -> str:
    """Short type name for syntax lines (System.String -> String)."""
    type_name = unwrap_nullable(type_name)
    if "[" in type_name:
        return type_name
    return type_name.rsplit(".", 1)[-1]


class CommandHelpMarkdownWriter:
    """
    Write a command's help as a markdown page.

    Example:
        >>> settings = CommandHelpWriterSettings("utf-8", Path("out/Get-Widget.md"))
        >>> CommandHelpMarkdownWriter(settings).write(command_help, metadata)
    """

    def __init__(self, settings: CommandHelpWriterSettings):
        self.settings = settings

    def write(self, command_help: CommandHelp, metadata: Optional[Mapping[str, Any]] = None) -> Path:
        """
        Render and save a command page.

        Args:
            command_help: Help Model of the command
            metadata: Front matter keys

        Returns:
            Path of the written file
        """
        content = self.render(command_help, metadata)
        path = Path(self.settings.destination_path)
        with open(path, "w", encoding=self.settings.encoding, newline="\n") as f:
            f.write(content)

        logger.debug(f"Saved markdown help for {command_help.title} to {path}")
        return path

    def render(self, command_help: CommandHelp, metadata: Optional[Mapping[str, Any]] = None) -> str:
        """Render a command page to a string."""
        lines: List[str] = []

        if metadata:
            lines.extend(["---", dump_yaml(metadata), "---", ""])

        lines.extend([f"# {command_help.title}", ""])

        lines.extend(["## SYNOPSIS", ""])
        if command_help.synopsis:
            lines.extend([command_help.synopsis, ""])

        lines.extend(["## SYNTAX", ""])
        for syntax in command_help.syntax:
            lines.extend(self._syntax_section(syntax, command_help))

        lines.extend(["## ALIASES", ""])
        if command_help.aliases:
            lines.extend(f"- {alias}" for alias in command_help.aliases)
            lines.append("")
        else:
            lines.extend(["This cmdlet has no aliases.", ""])

        lines.extend(["## DESCRIPTION", ""])
        if command_help.description:
            lines.extend([command_help.description.strip(), ""])

        lines.extend(["## EXAMPLES", ""])
        for example in command_help.examples:
            lines.extend([f"### {example.title}", ""])
            if example.remarks:
                lines.extend([example.remarks.strip(), ""])

        lines.extend(["## PARAMETERS", ""])
        for parameter in command_help.parameters:
            lines.extend(self._parameter_section(parameter))
        if command_help.has_cmdlet_binding:
            lines.extend(["### CommonParameters", "", COMMON_PARAMETERS_TEXT, ""])

        lines.extend(["## INPUTS", ""])
        for item in command_help.inputs:
            lines.extend([f"### {item.typename}", ""])
            if item.description:
                lines.extend([item.description.strip(), ""])

        lines.extend(["## OUTPUTS", ""])
        for item in command_help.outputs:
            lines.extend([f"### {item.typename}", ""])
            if item.description:
                lines.extend([item.description.strip(), ""])

        lines.extend(["## NOTES", ""])
        if command_help.notes:
            lines.extend([command_help.notes.strip(), ""])

        lines.extend(["## RELATED LINKS", ""])
        for link in command_help.related_links:
            lines.append(f"- [{link.link_text}]({link.uri})")

        return "\n".join(lines).rstrip("\n") + "\n"

    def _syntax_section(self, syntax: SyntaxItem, command_help: CommandHelp) -> List[str]:
        heading = f"### {syntax.parameter_set_name}"
        if syntax.is_default:
            heading += " (Default)"

        return [heading, "", "```", self.format_syntax_line(syntax, command_help), "```", ""]

    def format_syntax_line(self, syntax: SyntaxItem, command_help: CommandHelp) -> str:
        """
        Render 'Verb-Noun [-Name] <Type> [-Switch] [<CommonParameters>]'.

        Types come from the command-wide type map, so a parameter shows the
        same type on every syntax line.
        """
        resolver = TypeResolver.from_syntax(command_help.syntax, command_help.title)
        parts = [syntax.command_name.split(" ", 1)[0]]
        for syntax_param in syntax.syntax_parameters:
            parts.append(self._syntax_parameter(syntax_param, command_help, resolver))
        if command_help.has_cmdlet_binding:
            parts.append("[<CommonParameters>]")
        return " ".join(parts)

    def _syntax_parameter(
        self,
        syntax_param: SyntaxParameter,
        command_help: CommandHelp,
        resolver: TypeResolver
    ) -> str:
        type_name = resolver.types.get(syntax_param.parameter_name)
        if type_name is None:
            parameter = command_help.get_parameter(syntax_param.parameter_name)
            type_name = parameter.type if parameter is not None else None

        if type_name is None or type_name.endswith("SwitchParameter"):
            text = f"-{syntax_param.parameter_name}"
        else:
            name = f"-{syntax_param.parameter_name}"
            if syntax_param.is_positional:
                name = f"[{name}]"
            text = f"{name} <{display_type_name(type_name)}>"

        return text if syntax_param.is_mandatory else f"[{text}]"

    def _parameter_section(self, parameter: Parameter) -> List[str]:
        lines = [f"### -{parameter.name}", ""]
        if parameter.description:
            lines.extend([parameter.description.strip(), ""])

        lines.extend(["```yaml", dump_yaml(self._parameter_metadata(parameter)), "```", ""])
        return lines

    def _parameter_metadata(self, parameter: Parameter) -> Dict[str, Any]:
        return {
            "Type": parameter.type,
            "DefaultValue": parameter.default_value or "",
            "SupportsWildcards": parameter.supports_wildcards,
            "Aliases": list(parameter.aliases),
            "ParameterSets": [
                {
                    "Name": p.name,
                    "Position": p.position.capitalize() if not p.position.isdigit() else p.position,
                    "IsRequired": p.is_required,
                    "ValueFromPipeline": p.value_from_pipeline,
                    "ValueFromPipelineByPropertyName": p.value_from_pipeline_by_property_name,
                    "ValueFromRemainingArguments": p.value_from_remaining_arguments,
                }
                for p in parameter.parameter_sets
            ],
            "DontShow": parameter.dont_show,
            "AcceptedValues": list(parameter.accepted_values),
            "HelpMessage": parameter.help_message or "",
        }
