"""A paragraph that erodes, irreversibly, as its reader types."""

from palimpsest.config import ErosionConfig, VisualParameters
from palimpsest.core.chaos import ChaosController, ChaosState
from palimpsest.core.layout import LayoutState, compute_layout
from palimpsest.core.params import interpolate_parameters
from palimpsest.core.thresholds import ErosionThresholdTable
from palimpsest.paragraph import PARAGRAPH
from palimpsest.renderer import ErosionRenderer, GlyphDraw
from palimpsest.session import ErosionSession

__version__ = "0.1.0"
__all__ = [
    "PARAGRAPH",
    "ChaosController",
    "ChaosState",
    "ErosionConfig",
    "ErosionRenderer",
    "ErosionSession",
    "ErosionThresholdTable",
    "GlyphDraw",
    "LayoutState",
    "VisualParameters",
    "compute_layout",
    "interpolate_parameters",
]
