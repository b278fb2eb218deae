"""
The rendered paragraph.

Lines are broken by hand for rag control; the renderer never reflows them.
"""

from pathlib import Path
from typing import Union

Paragraph = tuple[str, ...]

PARAGRAPH: Paragraph = (
    "I am trying to express something that shifts",
    "as soon as I approach it.",
    "A thought forms, but when I bring it into language,",
    "it brushes the surface only lightly,",
    "like a tangent that touches a circle",
    "for a moment before veering away.",
    "What I say is never the whole of what I mean.",
    "Every attempt to translate myself",
    "becomes a transformation,",
    "and something essential slips through the gap.",
    "The words arrive altered,",
    "carrying only a trace of the original thought.",
)


def load_paragraph(path: Union[str, Path]) -> Paragraph:
    """
    Load a paragraph from a text file, one rendered line per file line.

    Trailing whitespace is stripped and blank lines at either end are
    dropped. Interior blank lines are kept as empty rendered lines.

    Raises:
        ValueError: If the file holds no text.
    """
    text = Path(path).read_text(encoding="utf-8")
    lines = [line.rstrip() for line in text.splitlines()]

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        raise ValueError(f"Paragraph file is empty: {path}")

    return tuple(lines)
