"""
Erosion session.

Owns the paragraph, its thresholds, the chaos state and the layout, and
turns the two external events (input change, surface resize) into
synchronous render passes.
"""

import numpy as np

from palimpsest.config import ErosionConfig, VisualParameters
from palimpsest.core.chaos import ChaosController
from palimpsest.core.layout import LayoutState, compute_layout
from palimpsest.core.params import interpolate_parameters
from palimpsest.core.thresholds import ErosionThresholdTable
from palimpsest.paragraph import PARAGRAPH, Paragraph
from palimpsest.renderer import ErosionRenderer, GlyphDraw
from palimpsest.surfaces import TextSurface


class ErosionSession:
    """
    Event dispatcher for one paragraph on one surface.

    Handlers run to completion and each ends with a full render, so
    there is never a partial redraw.
    """

    def __init__(
        self,
        surface: TextSurface,
        paragraph: Paragraph = PARAGRAPH,
        config: ErosionConfig | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        """
        Initialize the session and draw the first frame.

        Args:
            surface: Drawing surface.
            paragraph: Lines to erode.
            config: Erosion configuration. Uses defaults if None.
            seed: Seed for the random source (ignored if rng is given).
            rng: Random source shared by thresholds and rendering.
        """
        self.cfg = config or ErosionConfig()
        self.surface = surface
        self.paragraph = paragraph
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.thresholds = ErosionThresholdTable.generate(paragraph, self.rng, self.cfg)
        self.controller = ChaosController(max_length=self.cfg.max_length)
        self.renderer = ErosionRenderer(paragraph, self.thresholds, self.cfg)
        self.layout: LayoutState = compute_layout(len(paragraph), surface.height, self.cfg)

        self.frame: list[GlyphDraw] = []
        self.frames_rendered = 0

        self.render()

    @property
    def chaos_level(self) -> float:
        return self.controller.chaos_level

    @property
    def max_chaos(self) -> float:
        return self.controller.max_chaos

    @property
    def params(self) -> VisualParameters:
        return interpolate_parameters(self.max_chaos, self.cfg)

    def on_input_changed(self, length: int) -> list[GlyphDraw]:
        """Handle a new input length and redraw."""
        if self.controller.on_input_changed(length):
            self.render()
        return self.frame

    def on_resize(self, width: int, height: int) -> list[GlyphDraw]:
        """Handle a surface resize: recompute layout, then redraw."""
        self.surface.resize(width, height)
        self.layout = compute_layout(len(self.paragraph), self.surface.height, self.cfg)
        return self.render()

    def render(self) -> list[GlyphDraw]:
        """Render one complete frame to the surface."""
        self.frame = self.renderer.render_frame(
            self.max_chaos, self.layout, self.surface, self.rng
        )
        self.renderer.paint(self.surface, self.frame, self.layout.type_size)
        self.frames_rendered += 1
        return self.frame

    def eroded_fraction(self) -> float:
        return self.thresholds.eroded_fraction(self.max_chaos)
