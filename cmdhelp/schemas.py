"""
Pydantic schemas for the command Help Model.

The Help Model is the structured, already-parsed representation of one
command's documentation. It is produced by an external collaborator
(reflection over a module, a remote session, or a hand-written JSON
document) and is treated as read-only by every writer in this package.

Architecture:
- CommandHelp: One command's documentation (title, synopsis, syntax, ...)
- SyntaxItem / SyntaxParameter: One parameter-set-specific invocation signature
- Parameter / ParameterSet: Command-level parameter definition and memberships
- Example, InputOutput, Link: Supporting sections
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


NAMED_POSITION = "named"
"""Position sentinel for parameters that are not positional."""

SWITCH_PARAMETER_TYPES = frozenset({
    "SwitchParameter",
    "System.Management.Automation.SwitchParameter",
})


class HelpModel(BaseModel):
    """Base class for the immutable Help Model types."""
    model_config = ConfigDict(frozen=True)


# ============================================================================
# SYNTAX SCHEMAS
# ============================================================================

class SyntaxParameter(HelpModel):
    """One parameter occurrence inside a syntax variant."""
    parameter_name: str = Field(description="Parameter name")
    parameter_type: Optional[str] = Field(
        None,
        description="Locally declared type; None inherits the command-wide resolved type"
    )
    position: str = Field(NAMED_POSITION, description="Position within this syntax or 'named'")
    is_mandatory: bool = Field(False, description="Required in this parameter set")
    is_positional: bool = Field(False, description="Can be given without its name")


class SyntaxItem(HelpModel):
    """
    One syntax variant of a command.

    The command name may carry disambiguation text after a space
    (e.g. "Get-Widget (ById)"); only the text before the first space is
    the syntax label.
    """
    command_name: str = Field(description="Command name, optionally followed by a set label")
    parameter_set_name: str = Field("__AllParameterSets", description="Parameter set name")
    is_default: bool = Field(False, description="Whether this is the default parameter set")
    syntax_parameters: List[SyntaxParameter] = Field(
        default_factory=list,
        description="Parameters in declared order"
    )


# ============================================================================
# PARAMETER SCHEMAS
# ============================================================================

class ParameterSet(HelpModel):
    """Membership of a parameter in one parameter set."""
    name: str = Field("(All)", description="Parameter set name")
    position: str = Field(NAMED_POSITION, description="Integer position or 'named'")
    is_required: bool = Field(False, description="Required in this set")
    value_from_pipeline: bool = Field(False, description="Accepts pipeline input by value")
    value_from_pipeline_by_property_name: bool = Field(
        False,
        description="Accepts pipeline input by property name"
    )
    value_from_remaining_arguments: bool = Field(False, description="Collects remaining arguments")


class Parameter(HelpModel):
    """Command-level parameter definition."""
    name: str = Field(description="Parameter name (unique per command)")
    type: str = Field(description="Fully qualified type name")
    description: Optional[str] = Field(None, description="Free-form description")
    parameter_sets: List[ParameterSet] = Field(default_factory=list)
    supports_wildcards: bool = Field(False, description="Accepts wildcard characters")
    variable_length: bool = Field(True, description="Accepts an array of values")
    aliases: List[str] = Field(default_factory=list)
    default_value: Optional[str] = Field(None)
    accepted_values: List[str] = Field(default_factory=list)
    help_message: Optional[str] = Field(None)
    dont_show: bool = Field(False)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Id",
                "type": "System.String",
                "description": "The identifier of the widget.",
                "parameter_sets": [
                    {"name": "ById", "position": "0", "is_required": True}
                ],
                "supports_wildcards": False
            }
        }
    )

    @property
    def is_switch(self) -> bool:
        return self.type in SWITCH_PARAMETER_TYPES


# ============================================================================
# SUPPORTING SCHEMAS
# ============================================================================

class Example(HelpModel):
    """A usage example; remarks may mix prose and fenced code."""
    title: str = Field(description="Example title, e.g. 'Example 1'")
    remarks: str = Field("", description="Markdown text with introduction, code and remarks")


class InputOutput(HelpModel):
    """Pipeline input or output type description."""
    typename: str = Field(description="Type name")
    description: str = Field("", description="What the type carries")


class Link(HelpModel):
    """Related link."""
    link_text: str = Field(description="Display text")
    uri: str = Field("", description="Target URI")


# ============================================================================
# COMMAND SCHEMA
# ============================================================================

class CommandHelp(HelpModel):
    """
    Complete documentation for a single command.

    Built by an external collaborator before any writer runs; the writers
    only read from it.
    """
    title: str = Field(description="Command name in Verb-Noun form")
    module_name: str = Field("", description="Owning module")
    locale: str = Field("en-US", description="Culture name of the help content")
    external_help_file: str = Field("", description="Name of the MAML file shipping this help")
    online_version_url: Optional[str] = Field(None, description="Online help URI")
    synopsis: str = Field("", description="One-line summary")
    description: Optional[str] = Field(None, description="Free-form description")
    notes: Optional[str] = Field(None, description="Free-form notes")
    aliases: List[str] = Field(default_factory=list)
    has_cmdlet_binding: bool = Field(True, description="Supports common parameters")
    syntax: List[SyntaxItem] = Field(default_factory=list)
    parameters: List[Parameter] = Field(default_factory=list)
    examples: List[Example] = Field(default_factory=list)
    inputs: List[InputOutput] = Field(default_factory=list)
    outputs: List[InputOutput] = Field(default_factory=list)
    related_links: List[Link] = Field(default_factory=list)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "title": "Get-Widget",
                "module_name": "Widgets",
                "synopsis": "Gets widgets.",
                "description": "Para one.\n\nPara two line1\nline2.",
                "syntax": [
                    {
                        "command_name": "Get-Widget",
                        "syntax_parameters": [
                            {"parameter_name": "Id", "parameter_type": "String"}
                        ]
                    }
                ],
                "examples": [
                    {
                        "title": "Example 1",
                        "remarks": "Intro text.\n\n```\nGet-Widget -Id 1\n```\n\nMore remarks."
                    }
                ]
            }
        }
    )

    @model_validator(mode="after")
    def _check_unique_parameter_names(self) -> "CommandHelp":
        seen = set()
        for parameter in self.parameters:
            if parameter.name in seen:
                raise ValueError(f"Duplicate parameter '{parameter.name}' in {self.title}")
            seen.add(parameter.name)
        return self

    def get_parameter(self, name: str) -> Optional[Parameter]:
        """Look up a command-level parameter by name."""
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None
