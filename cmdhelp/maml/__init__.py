"""MAML conversion: Help Model to legacy XML help."""

from .converter import convert_command_help, convert_help_items
from .example_parser import parse_example_remarks
from .segmenter import segment, segment_text
from .serializer import write_help_items, write_to_file
from .type_resolver import TypeResolver

__all__ = [
    "convert_command_help",
    "convert_help_items",
    "parse_example_remarks",
    "segment",
    "segment_text",
    "write_help_items",
    "write_to_file",
    "TypeResolver",
]
