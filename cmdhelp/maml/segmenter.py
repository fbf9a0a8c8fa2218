"""
Text block segmentation for MAML descriptions.

Splits free-form markdown prose into the paragraph units written as
<maml:para> elements. Blocks that carry document structure (code, quotes,
tables, lists) are kept verbatim; plain prose has its line breaks folded so
the help engine can reflow it.

Classification only looks at the first line of each block, using the
ordered pattern table STRUCTURAL_PATTERNS.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

STRUCTURAL = "structural"
NARRATIVE = "narrative"

# Evaluated in order; the first match names the block kind.
STRUCTURAL_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    ("indented_code", re.compile(r"^ {4}")),
    ("fenced_code", re.compile(r"^(?:```|~~~)")),
    ("block_quote", re.compile(r"^>")),
    ("table", re.compile(r"^\|")),
    ("unordered_list", re.compile(r"^[-*]\s")),
    ("ordered_list", re.compile(r"^\d+\.")),
]

BLOCK_SEPARATOR = re.compile(r"\n{2,}")


@dataclass(frozen=True)
class Segment:
    """One paragraph-level unit of a segmented text."""
    text: str
    kind: str
    pattern: Optional[str] = None  # Name of the structural pattern that matched

    @property
    def is_structural(self) -> bool:
        return self.kind == STRUCTURAL


def classify_block(block: str) -> Optional[str]:
    """
    Return the name of the structural pattern matching the block's first line.

    Args:
        block: A single block of text (no blank lines inside)

    Returns:
        Pattern name, or None for narrative prose
    """
    first_line = block.split("\n", 1)[0]
    for name, pattern in STRUCTURAL_PATTERNS:
        if pattern.match(first_line):
            return name
    return None


def segment(text: Optional[str]) -> Tuple[Segment, ...]:
    """
    Split text on blank lines and classify each block.

    Args:
        text: Free-form markdown text (None is treated as empty)

    Returns:
        Segments in input order; whitespace-only blocks are dropped
    """
    if not text:
        return ()

    normalized = text.replace("\r\n", "\n").replace("\r", "\n").strip("\n")
    segments = []
    for block in BLOCK_SEPARATOR.split(normalized):
        if not block.strip():
            continue

        pattern_name = classify_block(block)
        if pattern_name is not None:
            segments.append(Segment(block.strip("\n"), STRUCTURAL, pattern_name))
        else:
            segments.append(Segment(block.replace("\n", " ").strip(), NARRATIVE))

    return tuple(segments)


def segment_text(text: Optional[str]) -> List[str]:
    """Segment text and return only the segment strings."""
    return [s.text for s in segment(text)]


def split_paragraphs(text: Optional[str]) -> List[str]:
    """
    Coarse split used for parameter descriptions.

    Splits on double newlines and trims each piece, without any structural
    detection.
    """
    if not text:
        return []
    return [piece.strip() for piece in text.replace("\r\n", "\n").split("\n\n")]
