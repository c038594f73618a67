"""
Plain-text rendering of alignments.

Each block has three lines: the left sequence, a marker line and the top
sequence. Gaps are drawn with GAP_CHAR, identities with MATCH_CHAR and
substitutions with MISMATCH_CHAR.
"""

from typing import Iterable

from pairalign.config import GAP_CHAR, LINE_WIDTH, MATCH_CHAR, MISMATCH_CHAR, SPACE_CHAR


def format_alignment(alignment, width: int = LINE_WIDTH) -> str:
    """
    Render an alignment as wrapped three-line blocks.

    Args:
        alignment: Alignment (or any iterable of (left, top) pairs)
        width: Number of columns per block

    Returns:
        The rendered text; blocks are separated by a newline
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")

    line1, line2, line3 = [], [], []
    for first, second in alignment:
        line1.append(GAP_CHAR if first is None else first.name)
        line3.append(GAP_CHAR if second is None else second.name)
        if first is None or second is None:
            line2.append(SPACE_CHAR)
        elif first == second:
            line2.append(MATCH_CHAR)
        else:
            line2.append(MISMATCH_CHAR)

    blocks = []
    for start in range(0, len(line1), width):
        end = start + width
        blocks.append("\n".join((
            "".join(line1[start:end]),
            "".join(line2[start:end]),
            "".join(line3[start:end]),
        )))
    if not blocks:
        blocks.append("\n\n")
    return "\n".join(blocks)


def format_alignments(alignments: Iterable, width: int = LINE_WIDTH) -> str:
    """Render several alignments, each preceded by its score."""
    parts = []
    for k, alignment in enumerate(alignments, start=1):
        parts.append(f"# Alignment {k}, score {alignment.score:g}")
        parts.append(format_alignment(alignment, width))
    return "\n".join(parts)
