"""
Layout engine.

Fits the paragraph block into the available surface height and centers
it vertically.
"""

from dataclasses import dataclass

from palimpsest.config import ErosionConfig


@dataclass(frozen=True)
class LayoutState:
    """Effective type metrics for the current surface size."""

    type_size: float
    line_height: float
    base_y: float  # baseline of the first line
    scale: float = 1.0


def compute_layout(
    line_count: int,
    surface_height: float,
    config: ErosionConfig | None = None,
) -> LayoutState:
    """
    Compute the layout for a paragraph on a surface.

    If the block at baseline size would take more than ``fit_fraction`` of
    the surface height, type size and line height are scaled down together
    so it fits exactly.

    Args:
        line_count: Number of paragraph lines.
        surface_height: Current drawing surface height.
        config: Erosion configuration. Uses defaults if None.

    Returns:
        LayoutState for this surface height. Degenerate (zero-sized) for a
        zero-height surface, never an error.
    """
    cfg = config or ErosionConfig()

    type_size = cfg.base_type_size
    line_height = cfg.base_line_height
    scale = 1.0

    total_height = line_count * line_height
    max_allowed_height = surface_height * cfg.fit_fraction

    if total_height > max_allowed_height:
        scale = max_allowed_height / total_height
        type_size = cfg.base_type_size * scale
        line_height = cfg.base_line_height * scale
        total_height = line_count * line_height

    base_y = (surface_height - total_height) / 2 + line_height

    return LayoutState(
        type_size=type_size,
        line_height=line_height,
        base_y=base_y,
        scale=scale,
    )
