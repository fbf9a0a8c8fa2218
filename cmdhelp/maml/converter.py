"""
Help Model to MAML tree conversion.

Builds the complete MAML output tree for a command from its Help Model.
This is a pure transformation: nothing is written here and the Help Model
is never modified. Serialization lives in cmdhelp.maml.serializer.
"""

import logging
from typing import Iterable, List, Optional

from cmdhelp.exceptions import MalformedCommandTitleError
from cmdhelp import schemas as model
from cmdhelp.maml.example_parser import decorate_title, parse_example_remarks
from cmdhelp.maml.schemas import (
    AlertItem,
    Command,
    CommandDetails,
    CommandExample,
    CommandValue,
    DataType,
    HelpItems,
    MamlParameter,
    NavigationLink,
    ParameterValue,
    SyntaxItem,
)
from cmdhelp.maml.segmenter import segment_text, split_paragraphs
from cmdhelp.maml.type_resolver import TypeResolver

logger = logging.getLogger(__name__)

NULLABLE_PREFIX = "System.Nullable`1["


def convert_help_items(commands: Iterable[model.CommandHelp]) -> HelpItems:
    """Convert a collection of commands into one HelpItems document."""
    help_items = HelpItems()
    for command_help in commands:
        help_items.commands.append(convert_command_help(command_help))
    return help_items


def convert_command_help(command_help: model.CommandHelp) -> Command:
    """
    Convert one command's Help Model into a MAML command tree.

    Args:
        command_help: Help Model of the command

    Returns:
        Command tree ready for serialization

    Raises:
        MalformedCommandTitleError: title is not in Verb-Noun form
        TypeResolutionError: a syntax parameter has no resolvable type
    """
    logger.debug(f"Converting {command_help.title} to MAML")

    command = Command(details=convert_details(command_help))
    command.description.extend(segment_text(command_help.description))

    # Notes stay a single paragraph for better formatting
    if command_help.notes is not None:
        command.alert_set.append(AlertItem(remark=[command_help.notes]))

    resolver = TypeResolver.from_syntax(command_help.syntax, command_help.title)
    for syntax in command_help.syntax:
        command.syntax.append(convert_syntax(syntax, resolver, command_help))

    for number, example in enumerate(command_help.examples, 1):
        command.examples.append(convert_example(example, number))

    for parameter in command_help.parameters:
        command.parameters.append(convert_parameter(parameter))

    command.input_types.extend(convert_input_output(command_help.inputs))
    command.return_values.extend(convert_input_output(command_help.outputs))

    for link in command_help.related_links:
        command.related_links.append(NavigationLink(link_text=link.link_text, uri=link.uri))

    return command


def convert_details(command_help: model.CommandHelp) -> CommandDetails:
    """Derive name, verb and noun from the title (split on the first '-')."""
    verb, separator, noun = command_help.title.partition("-")
    if not separator:
        raise MalformedCommandTitleError(command_help.title)

    details = CommandDetails(name=command_help.title, verb=verb, noun=noun)
    details.synopsis.append(command_help.synopsis)
    return details


def convert_syntax(
    syntax: model.SyntaxItem,
    resolver: TypeResolver,
    command_help: model.CommandHelp
) -> SyntaxItem:
    """
    Convert one syntax variant.

    Parameters keep the variant's declared order and are annotated with the
    command-wide resolved type.
    """
    command_name = syntax.command_name.split(" ", 1)[0]
    new_syntax = SyntaxItem(command_name=command_name)

    for syntax_param in syntax.syntax_parameters:
        resolved_type = resolver.resolve(syntax_param.parameter_name)
        parameter = command_help.get_parameter(syntax_param.parameter_name)
        if parameter is None:
            parameter = _parameter_from_syntax(syntax_param, resolved_type, syntax.parameter_set_name)
        new_syntax.parameters.append(convert_parameter(parameter, resolved_type))

    return new_syntax


def _parameter_from_syntax(
    syntax_param: model.SyntaxParameter,
    resolved_type: str,
    parameter_set_name: str
) -> model.Parameter:
    return model.Parameter(
        name=syntax_param.parameter_name,
        type=resolved_type,
        parameter_sets=[
            model.ParameterSet(
                name=parameter_set_name,
                position=syntax_param.position,
                is_required=syntax_param.is_mandatory
            )
        ]
    )


def unwrap_nullable(type_name: str) -> str:
    """Turn 'System.Nullable`1[Inner]' into 'Inner'; other names pass through."""
    if type_name.lower().startswith(NULLABLE_PREFIX.lower()) and type_name.endswith("]"):
        return type_name[len(NULLABLE_PREFIX):-1]
    return type_name


def get_parameter_value(
    parameter: model.Parameter,
    syntax_parameter_type: Optional[str] = None
) -> Optional[ParameterValue]:
    """
    Build command:parameterValue, or None for switch parameters.

    A syntax-specific type always wins and is used as is; otherwise the
    parameter's own type is used with any nullable wrapper removed.
    """
    if parameter.is_switch:
        return None

    if syntax_parameter_type is not None:
        data_type = syntax_parameter_type
    else:
        data_type = unwrap_nullable(parameter.type)

    return ParameterValue(
        data_type=data_type,
        is_mandatory=True,
        is_variable_length=parameter.variable_length
    )


def get_pipeline_input(parameter: model.Parameter) -> str:
    """Summarize pipeline input support across all parameter sets."""
    by_value = any(p.value_from_pipeline for p in parameter.parameter_sets)
    by_property = any(p.value_from_pipeline_by_property_name for p in parameter.parameter_sets)

    if by_value and by_property:
        return "True (ByPropertyName, ByValue)"
    if by_value:
        return "True (ByValue)"
    if by_property:
        return "True (ByPropertyName)"
    return "False"


def convert_parameter(
    parameter: model.Parameter,
    syntax_parameter_type: Optional[str] = None
) -> MamlParameter:
    """
    Convert a command-level parameter.

    Args:
        parameter: Help Model parameter
        syntax_parameter_type: Resolved type when rendering a syntax occurrence

    Returns:
        MamlParameter
    """
    first_set = parameter.parameter_sets[0] if parameter.parameter_sets else None

    new_parameter = MamlParameter(
        name=parameter.name,
        is_mandatory=any(p.is_required for p in parameter.parameter_sets),
        supports_globbing=parameter.supports_wildcards,
        position=first_set.position if first_set is not None else model.NAMED_POSITION,
        pipeline_input=get_pipeline_input(parameter),
        aliases=", ".join(parameter.aliases) if parameter.aliases else "none",
        default_value=parameter.default_value or "None",
        is_variable_length=parameter.variable_length,
        value=get_parameter_value(parameter, syntax_parameter_type),
        type=DataType(name=parameter.type),
    )
    new_parameter.description.extend(split_paragraphs(parameter.description))

    return new_parameter


def convert_example(example: model.Example, number: int) -> CommandExample:
    """Convert an example, splitting its remarks into the three MAML sections."""
    parsed = parse_example_remarks(example.remarks)
    return CommandExample(
        number=number,
        title=decorate_title(example.title),
        introduction=parsed.introduction,
        code=parsed.code,
        remarks=parsed.remarks
    )


def convert_input_output(items: Iterable[model.InputOutput]) -> List[CommandValue]:
    """Project input/output descriptions into type + description pairs."""
    return [
        CommandValue(data_type=DataType(name=io.typename), description=[io.description])
        for io in items
    ]
