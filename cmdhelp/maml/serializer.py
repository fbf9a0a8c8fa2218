"""
MAML XML serialization.

Turns a HelpItems tree into the namespaced XML vocabulary read by the
shell's help engine (command:*, maml:*, dev:*). The element layout follows
the published MAML command schema; namespace URIs are fixed.
"""

import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Union
from xml.etree import ElementTree

from cmdhelp.maml.schemas import (
    Command,
    CommandExample,
    CommandValue,
    HelpItems,
    MamlParameter,
    SyntaxItem,
)

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "http://msh"

NAMESPACES = {
    "maml": "http://schemas.microsoft.com/maml/2004/10",
    "command": "http://schemas.microsoft.com/maml/dev/command/2004/10",
    "dev": "http://schemas.microsoft.com/maml/dev/2004/10",
    "MSHelp": "http://msdn.microsoft.com/mshelp",
}

# helpItems and its attributes stay unprefixed under the default namespace
ElementTree.register_namespace("", DEFAULT_NAMESPACE)
for _prefix, _uri in NAMESPACES.items():
    ElementTree.register_namespace(_prefix, _uri)


def _q(prefix: str, tag: str) -> str:
    return f"{{{NAMESPACES[prefix]}}}{tag}"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _sub(parent: ElementTree.Element, prefix: str, tag: str, text: Optional[str] = None) -> ElementTree.Element:
    element = ElementTree.SubElement(parent, _q(prefix, tag))
    if text is not None:
        element.text = text
    return element


def _add_paras(parent: ElementTree.Element, paragraphs: List[str]) -> None:
    for paragraph in paragraphs:
        _sub(parent, "maml", "para", paragraph)


def _add_description(parent: ElementTree.Element, paragraphs: List[str]) -> ElementTree.Element:
    description = _sub(parent, "maml", "description")
    _add_paras(description, paragraphs)
    return description


def _parameter_element(parent: ElementTree.Element, parameter: MamlParameter) -> ElementTree.Element:
    element = _sub(parent, "command", "parameter")
    element.set("required", _bool(parameter.is_mandatory))
    element.set("variableLength", _bool(parameter.is_variable_length))
    element.set("globbing", _bool(parameter.supports_globbing))
    element.set("pipelineInput", parameter.pipeline_input)
    element.set("position", parameter.position)
    element.set("aliases", parameter.aliases)

    _sub(element, "maml", "name", parameter.name)
    _add_description(element, parameter.description)

    if parameter.value is not None:
        value = _sub(element, "command", "parameterValue", parameter.value.data_type)
        value.set("required", _bool(parameter.value.is_mandatory))
        value.set("variableLength", _bool(parameter.value.is_variable_length))

    dev_type = _sub(element, "dev", "type")
    _sub(dev_type, "maml", "name", parameter.type.name)
    _sub(dev_type, "maml", "uri", parameter.type.uri)
    _sub(element, "dev", "defaultValue", parameter.default_value)
    return element


def _syntax_element(parent: ElementTree.Element, syntax: SyntaxItem) -> None:
    item = _sub(parent, "command", "syntaxItem")
    _sub(item, "maml", "name", syntax.command_name)
    for parameter in syntax.parameters:
        _parameter_element(item, parameter)


def _example_element(parent: ElementTree.Element, example: CommandExample) -> None:
    element = _sub(parent, "command", "example")
    _sub(element, "maml", "title", example.title)
    introduction = _sub(element, "maml", "introduction")
    _add_paras(introduction, example.introduction)
    _sub(element, "dev", "code", example.code)
    remarks = _sub(element, "dev", "remarks")
    _add_paras(remarks, example.remarks)


def _value_elements(parent: ElementTree.Element, tag: str, values: List[CommandValue]) -> None:
    for value in values:
        element = _sub(parent, "command", tag)
        dev_type = _sub(element, "dev", "type")
        _sub(dev_type, "maml", "name", value.data_type.name)
        _add_description(element, value.description)


def command_element(command: Command) -> ElementTree.Element:
    """Build the command:command element for one command."""
    root = ElementTree.Element(_q("command", "command"))

    details = _sub(root, "command", "details")
    _sub(details, "command", "name", command.details.name)
    _sub(details, "command", "verb", command.details.verb)
    _sub(details, "command", "noun", command.details.noun)
    _add_description(details, command.details.synopsis)

    _add_description(root, command.description)

    syntax = _sub(root, "command", "syntax")
    for item in command.syntax:
        _syntax_element(syntax, item)

    parameters = _sub(root, "command", "parameters")
    for parameter in command.parameters:
        _parameter_element(parameters, parameter)

    _value_elements(_sub(root, "command", "inputTypes"), "inputType", command.input_types)
    _value_elements(_sub(root, "command", "returnValues"), "returnValue", command.return_values)

    alert_set = _sub(root, "maml", "alertSet")
    for alert in command.alert_set:
        _add_paras(_sub(alert_set, "maml", "alert"), alert.remark)

    examples = _sub(root, "command", "examples")
    for example in command.examples:
        _example_element(examples, example)

    links = _sub(root, "command", "relatedLinks")
    for link in command.related_links:
        navigation = _sub(links, "maml", "navigationLink")
        _sub(navigation, "maml", "linkText", link.link_text)
        _sub(navigation, "maml", "uri", link.uri)

    return root


def build_element_tree(help_items: HelpItems) -> ElementTree.ElementTree:
    """Build the full helpItems document tree."""
    root = ElementTree.Element(f"{{{DEFAULT_NAMESPACE}}}helpItems")
    root.set("schema", help_items.schema_name)
    for command in help_items.commands:
        root.append(command_element(command))

    tree = ElementTree.ElementTree(root)
    ElementTree.indent(tree, space="  ")
    return tree


def write_help_items(help_items: HelpItems, stream: BinaryIO, encoding: str = "utf-8") -> None:
    """
    Serialize help items to a binary stream.

    Args:
        help_items: MAML tree
        stream: Writable binary stream owned by the caller
        encoding: Text encoding declared in and used for the document
    """
    tree = build_element_tree(help_items)
    tree.write(stream, encoding=encoding, xml_declaration=True)


def to_string(help_items: HelpItems) -> str:
    """Serialize help items to an XML string (no declaration)."""
    tree = build_element_tree(help_items)
    return ElementTree.tostring(tree.getroot(), encoding="unicode")


def write_to_file(help_items: HelpItems, path: Union[str, Path], encoding: str = "utf-8") -> Path:
    """
    Write help items to a MAML file.

    The file is opened right before serialization and always closed; open or
    write errors propagate to the caller.

    Returns:
        Absolute path of the written file
    """
    output_path = Path(path).resolve()
    with open(output_path, "wb") as stream:
        write_help_items(help_items, stream, encoding)

    logger.info(f"Saved MAML help to {output_path} ({len(help_items.commands)} commands)")
    return output_path
