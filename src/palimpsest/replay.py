"""
Typing-session replay.

Feeds a scripted sequence of input lengths through a session and yields
the rendered frames, for headless export.
"""

from typing import Iterator

import numpy as np

from palimpsest.session import ErosionSession


def typing_lengths(
    total: int,
    chars_per_frame: int = 1,
    backspace: int = 0,
) -> list[int]:
    """
    Input lengths seen while typing ``total`` characters, then deleting some.

    Starts at 0 and always includes ``total`` itself.

    Args:
        total: Number of characters typed.
        chars_per_frame: Keystrokes between two rendered frames.
        backspace: Characters deleted at the end.
    """
    step = max(1, chars_per_frame)
    total = max(0, total)

    lengths = list(range(0, total, step))
    lengths.append(total)

    floor = max(0, total - max(0, backspace))
    length = total
    while length > floor:
        length = max(floor, length - step)
        lengths.append(length)

    return lengths


def replay(
    session: ErosionSession,
    lengths: list[int],
    progress_callback: callable = None,
) -> Iterator[np.ndarray]:
    """
    Render one frame per input length.

    Args:
        session: Session drawing to a surface with ``to_array``.
        lengths: Input lengths, in event order.
        progress_callback: Optional callback(current, total).

    Yields:
        (H, W, 3) uint8 RGB arrays, one per length.
    """
    total = len(lengths)
    for i, length in enumerate(lengths):
        session.on_input_changed(length)
        yield session.surface.to_array()

        if progress_callback:
            progress_callback(i + 1, total)


def hold(surface, count: int) -> Iterator[np.ndarray]:
    """
    Repeat the surface's current frame ``count`` times.

    The frame is read on first iteration, so this can be chained after
    a replay that has not run yet.
    """
    frame = surface.to_array()
    for _ in range(max(0, count)):
        yield frame
