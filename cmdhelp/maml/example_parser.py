"""
Example remarks parsing.

An example's remarks are a single markdown blob mixing prose and fenced
code. MAML wants three sections instead:

- maml:introduction: prose before the first code block
- dev:code: the first code block plus any code blocks directly after it
- dev:remarks: everything after that

Block boundaries come from a CommonMark parser, so code nested in a list
item or block quote stays part of that container and a fence may contain
blank lines. The sections are then built by a fold over the top-level
blocks.
"""

from dataclasses import dataclass
from functools import reduce
from typing import List, NamedTuple, Tuple

from markdown_it import MarkdownIt

EXAMPLE_TITLE_FORMAT = "--------- {title} ---------"
CODE_JOINER = "\n\n"
INTRODUCTION_TERMINATOR = "\n\n"

CODE_TOKEN_TYPES = frozenset({"fence", "code_block"})

_parser = MarkdownIt("commonmark")


@dataclass(frozen=True)
class MarkdownBlock:
    """A top-level markdown block with its source text."""
    source: str
    is_code: bool = False
    code: str = ""  # Code content without fences or indentation


class ExampleSections(NamedTuple):
    """Accumulators of the remarks fold."""
    introduction: Tuple[str, ...] = ()
    code: Tuple[str, ...] = ()
    remarks: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedExample:
    """Final introduction / code / remarks split of one example."""
    introduction: List[str]
    code: str
    remarks: List[str]


def decorate_title(title: str) -> str:
    """Wrap an example title in the fixed MAML decoration."""
    return EXAMPLE_TITLE_FORMAT.format(title=title)


def parse_blocks(text: str) -> List[MarkdownBlock]:
    """
    Parse markdown into its top-level blocks.

    Args:
        text: Markdown source

    Returns:
        Blocks in document order
    """
    source = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = source.split("\n")
    blocks = []

    for token in _parser.parse(source):
        # Closing tokens and anything inside a container are skipped
        if token.level != 0 or token.nesting < 0 or token.map is None:
            continue

        start, end = token.map
        block_source = "\n".join(lines[start:end]).strip("\n")

        if token.type in CODE_TOKEN_TYPES:
            blocks.append(MarkdownBlock(
                source=block_source,
                is_code=True,
                code=token.content.rstrip("\n")
            ))
        else:
            blocks.append(MarkdownBlock(source=block_source.strip()))

    return blocks


def _fold_block(sections: ExampleSections, block: MarkdownBlock) -> ExampleSections:
    if not sections.code:
        if block.is_code:
            return sections._replace(code=(block.code,))
        return sections._replace(introduction=sections.introduction + (block.source,))

    if block.is_code and not sections.remarks:
        return sections._replace(code=sections.code + (block.code,))

    return sections._replace(remarks=sections.remarks + (block.source,))


def split_sections(blocks: List[MarkdownBlock]) -> ExampleSections:
    """Fold blocks into introduction, code and remarks accumulators."""
    return reduce(_fold_block, blocks, ExampleSections())


def parse_example_remarks(text: str) -> ParsedExample:
    """
    Split an example's remarks into introduction, code and remarks.

    The last introduction paragraph gets two trailing newlines so the help
    engine does not run it into the first remarks paragraph. Without any
    code block, all text is introduction and code is empty.

    Args:
        text: Example remarks (markdown)

    Returns:
        ParsedExample
    """
    sections = split_sections(parse_blocks(text or ""))

    introduction = list(sections.introduction)
    if introduction:
        introduction[-1] += INTRODUCTION_TERMINATOR

    return ParsedExample(
        introduction=introduction,
        code=CODE_JOINER.join(sections.code),
        remarks=list(sections.remarks)
    )
