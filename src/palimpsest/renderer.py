"""
Erosion renderer.

Builds one complete frame as a list of draw commands, then paints it.
Per visible glyph:
- Eroded (max chaos reached its threshold) → skipped, spacing kept
- Distortion → positional jitter
- Glitch probability → glyph swapped for a stray stroke
- Alpha range → main glyph opacity
- Ghost probability → faint offset copy
"""

from dataclasses import dataclass

import numpy as np

from palimpsest.config import ErosionConfig, VisualParameters
from palimpsest.core.layout import LayoutState
from palimpsest.core.params import interpolate_parameters
from palimpsest.core.thresholds import ErosionThresholdTable
from palimpsest.paragraph import Paragraph
from palimpsest.surfaces import TextSurface


@dataclass(frozen=True)
class GlyphDraw:
    """A single glyph to draw, baseline-anchored."""

    char: str
    x: float
    y: float
    alpha: float
    line: int
    pos: int
    ghost: bool = False


class ErosionRenderer:
    """
    Renders the paragraph with its current erosion.

    Holds no mutable state: the same inputs and the same random stream
    produce the same frame.
    """

    def __init__(
        self,
        paragraph: Paragraph,
        thresholds: ErosionThresholdTable,
        config: ErosionConfig | None = None,
    ):
        if not thresholds.matches(paragraph):
            raise ValueError("Threshold table does not match paragraph shape")
        self.paragraph = paragraph
        self.thresholds = thresholds
        self.cfg = config or ErosionConfig()

    def advances(self, line: str, surface: TextSurface, type_size: float) -> list[float]:
        """Horizontal step for each character of a line."""
        cfg = self.cfg
        space_step = surface.text_width(" ", type_size) * cfg.word_spacing
        widths: dict[str, float] = {}

        steps = []
        for ch in line:
            if ch == " ":
                steps.append(space_step)
                continue
            if ch not in widths:
                widths[ch] = surface.text_width(ch, type_size) * cfg.letter_spacing
            steps.append(widths[ch])
        return steps

    def render_frame(
        self,
        max_chaos: float,
        layout: LayoutState,
        surface: TextSurface,
        rng: np.random.Generator,
        params: VisualParameters | None = None,
    ) -> list[GlyphDraw]:
        """
        Build the draw commands for one frame.

        Args:
            max_chaos: Highest chaos level reached so far.
            layout: Current layout.
            surface: Surface used for measurement (not drawn to).
            rng: Random source for jitter, glitch and ghost decisions.
            params: Visual parameters. Interpolated from max_chaos if None.

        Returns:
            Draw commands in paint order.
        """
        cfg = self.cfg
        params = params or interpolate_parameters(max_chaos, cfg)
        ghost_lo, ghost_hi = cfg.ghost_alpha

        commands: list[GlyphDraw] = []

        for i, line in enumerate(self.paragraph):
            steps = self.advances(line, surface, layout.type_size)
            line_width = sum(steps)

            x = surface.width / 2 - line_width / 2
            y = layout.base_y + i * layout.line_height

            for j, ch in enumerate(line):
                step = steps[j]

                # Permanent erosion
                if self.thresholds.is_eroded(i, j, max_chaos):
                    x += step
                    continue

                jitter_x = rng.uniform(-cfg.jitter, cfg.jitter) * params.distortion
                jitter_y = rng.uniform(-cfg.jitter, cfg.jitter) * params.distortion

                draw_char = ch
                if ch != " " and rng.random() < params.glitch_prob:
                    draw_char = str(rng.choice(cfg.glitch_set))

                gx = x + jitter_x
                gy = y + jitter_y
                commands.append(GlyphDraw(
                    char=draw_char,
                    x=gx,
                    y=gy,
                    alpha=rng.uniform(params.min_alpha, params.max_alpha),
                    line=i,
                    pos=j,
                ))

                if rng.random() < params.ghost_prob:
                    commands.append(GlyphDraw(
                        char=draw_char,
                        x=gx + rng.uniform(-cfg.ghost_offset, cfg.ghost_offset),
                        y=gy + rng.uniform(-cfg.ghost_offset, cfg.ghost_offset),
                        alpha=rng.uniform(ghost_lo, ghost_hi),
                        line=i,
                        pos=j,
                        ghost=True,
                    ))

                x += step

        return commands

    def paint(
        self,
        surface: TextSurface,
        commands: list[GlyphDraw],
        type_size: float,
    ):
        """Clear the surface and draw every command."""
        surface.clear()
        for cmd in commands:
            if cmd.char == " ":
                continue
            surface.draw_text(cmd.char, cmd.x, cmd.y, type_size, cmd.alpha)
