"""
Configuration for the erosion engine.

Every tunable constant of layout, erosion, interpolation and rendering
lives here so the core modules stay free of magic numbers.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VisualParameters:
    """Rendering parameters for one frame."""

    distortion: float
    glitch_prob: float
    ghost_prob: float
    min_alpha: float
    max_alpha: float


# Baseline visual feel (no input yet)
BASE_PARAMS = VisualParameters(
    distortion=0.7,
    glitch_prob=0.04,
    ghost_prob=0.40,
    min_alpha=185,
    max_alpha=235,
)

# Max erosion visual feel (after a lot of typing).
# Both alpha bounds drop, so the opacity band narrows and dims.
MAX_PARAMS = VisualParameters(
    distortion=1.2,
    glitch_prob=0.16,
    ghost_prob=0.90,
    min_alpha=130,
    max_alpha=210,
)

GLITCH_SET = ("/", "|", "·", "—")


@dataclass
class ErosionConfig:
    """Configuration for layout, erosion and rendering."""

    # Layout ("ideal" size before fitting to the surface)
    base_type_size: float = 60.0
    base_line_height: float = 80.0
    fit_fraction: float = 0.8  # max share of the surface height used by text

    # Chaos
    max_length: int = 400  # input length that reaches full chaos
    easing_exponent: float = 1.4

    # Erosion thresholds
    threshold_cap: float = 0.8  # by ~80% chaos basically everything is gone
    space_threshold: float = 1.1  # must stay above 1.0 so spaces never erode

    # Tracking
    letter_spacing: float = 1.12
    word_spacing: float = 2.0

    # Per-glyph effects
    jitter: float = 1.2
    ghost_offset: float = 2.0
    ghost_alpha: tuple[float, float] = (60.0, 150.0)
    glitch_set: tuple[str, ...] = GLITCH_SET

    base_params: VisualParameters = field(default_factory=lambda: BASE_PARAMS)
    max_params: VisualParameters = field(default_factory=lambda: MAX_PARAMS)

    # Surface
    font_name: str = "Georgia"
    background: int = 255
    ink: int = 0


@dataclass
class OutputProfile:
    """Resolution and frame rate for headless renders."""

    width: int
    height: int
    fps: int


PROFILES = {
    "low": OutputProfile(width=1280, height=720, fps=30),
    "medium": OutputProfile(width=1920, height=1080, fps=30),
    "high": OutputProfile(width=3840, height=2160, fps=30),
}
