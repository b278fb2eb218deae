"""Core erosion model."""

from palimpsest.core.chaos import ChaosController, ChaosState
from palimpsest.core.layout import LayoutState, compute_layout
from palimpsest.core.params import interpolate_parameters
from palimpsest.core.thresholds import ErosionThresholdTable

__all__ = [
    "ChaosController",
    "ChaosState",
    "ErosionThresholdTable",
    "LayoutState",
    "compute_layout",
    "interpolate_parameters",
]
