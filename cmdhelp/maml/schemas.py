"""
Pydantic schemas for the MAML output tree.

These models mirror the legacy MAML help schema element by element. They are
built fresh for each command by cmdhelp.maml.converter and turned into XML
by cmdhelp.maml.serializer.

Structure:
HelpItems
  Command
    CommandDetails        -> command:details
    description           -> maml:description
    AlertItem             -> maml:alertSet / maml:alert
    SyntaxItem            -> command:syntax / command:syntaxItem
    MamlParameter         -> command:parameters / command:parameter
    CommandExample        -> command:examples / command:example
    CommandValue          -> command:inputTypes, command:returnValues
    NavigationLink        -> command:relatedLinks / maml:navigationLink
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class DataType(BaseModel):
    """dev:type element."""
    name: str = Field("", description="Type name")
    uri: str = Field("", description="Type URI")


class ParameterValue(BaseModel):
    """command:parameterValue element; absent for switch parameters."""
    data_type: str = Field(description="Rendered type name")
    is_mandatory: bool = Field(True)
    is_variable_length: bool = Field(False)


class MamlParameter(BaseModel):
    """command:parameter element, used in syntax items and the parameter list."""
    name: str
    is_mandatory: bool = False
    supports_globbing: bool = False
    position: str = "named"
    pipeline_input: str = "False"
    aliases: str = "none"
    default_value: str = "None"
    is_variable_length: bool = True
    value: Optional[ParameterValue] = None
    type: DataType = Field(default_factory=DataType)
    description: List[str] = Field(default_factory=list)


class SyntaxItem(BaseModel):
    """command:syntaxItem element."""
    command_name: str
    parameters: List[MamlParameter] = Field(default_factory=list)


class CommandDetails(BaseModel):
    """command:details element."""
    name: str
    verb: str
    noun: str
    synopsis: List[str] = Field(default_factory=list)


class AlertItem(BaseModel):
    """maml:alert element inside maml:alertSet."""
    remark: List[str] = Field(default_factory=list)


class CommandExample(BaseModel):
    """command:example element."""
    number: int = Field(description="1-based position in the command's example list")
    title: str
    introduction: List[str] = Field(default_factory=list)
    code: str = ""
    remarks: List[str] = Field(default_factory=list)


class CommandValue(BaseModel):
    """command:inputType / command:returnValue element."""
    data_type: DataType = Field(default_factory=DataType)
    description: List[str] = Field(default_factory=list)


class NavigationLink(BaseModel):
    """maml:navigationLink element."""
    link_text: str
    uri: str = ""


class Command(BaseModel):
    """command:command element."""
    details: CommandDetails
    description: List[str] = Field(default_factory=list)
    alert_set: List[AlertItem] = Field(default_factory=list)
    syntax: List[SyntaxItem] = Field(default_factory=list)
    parameters: List[MamlParameter] = Field(default_factory=list)
    examples: List[CommandExample] = Field(default_factory=list)
    input_types: List[CommandValue] = Field(default_factory=list)
    return_values: List[CommandValue] = Field(default_factory=list)
    related_links: List[NavigationLink] = Field(default_factory=list)


class HelpItems(BaseModel):
    """helpItems root element."""
    schema_name: str = "maml"
    commands: List[Command] = Field(default_factory=list)
