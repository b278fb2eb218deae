"""
Drawing surfaces.

The renderer only needs text measurement and single-glyph drawing with an
opacity. Two backends provide that: Pillow for headless frames and pygame
for the interactive window.
"""

from pathlib import Path
from typing import Protocol, Union

import numpy as np
import pygame
from PIL import Image, ImageDraw, ImageFont


class TextSurface(Protocol):
    """What the renderer consumes from a drawing surface."""

    width: int
    height: int

    def resize(self, width: int, height: int) -> None: ...

    def clear(self) -> None: ...

    def text_width(self, text: str, size: float) -> float: ...

    def draw_text(self, text: str, x: float, y: float, size: float, alpha: float) -> None:
        """Draw text with (x, y) at the left end of its baseline."""
        ...


PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def _font_px(size: float) -> int:
    return max(1, int(round(size)))


class PillowSurface:
    """
    RGB Pillow image used as a drawing surface.

    Glyphs are blended with their alpha onto an opaque background, so
    overlapping ghosts darken the way translucent ink does.
    """

    def __init__(
        self,
        width: int,
        height: int,
        font_name: str = "Georgia",
        background: int = 255,
        ink: int = 0,
    ):
        self.font_name = font_name
        self.background = background
        self.ink = ink
        self._fonts: dict[int, PillowFont] = {}
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.image = Image.new(
            "RGB", (self.width, self.height), (self.background,) * 3
        )
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def clear(self) -> None:
        self._draw.rectangle(
            [0, 0, self.width, self.height], fill=(self.background,) * 3
        )

    def font(self, size: float) -> PillowFont:
        px = _font_px(size)
        font = self._fonts.get(px)
        if font is None:
            font = self._load_font(px)
            self._fonts[px] = font
        return font

    def _load_font(self, px: int) -> PillowFont:
        for candidate in (self.font_name, f"{self.font_name}.ttf"):
            try:
                return ImageFont.truetype(candidate, px)
            except OSError:
                continue
        # Bundled fallback when the named font isn't installed
        return ImageFont.load_default(size=px)

    def text_width(self, text: str, size: float) -> float:
        return float(self.font(size).getlength(text))

    def draw_text(self, text: str, x: float, y: float, size: float, alpha: float) -> None:
        fill = (self.ink, self.ink, self.ink, int(round(alpha)))
        font = self.font(size)
        if isinstance(font, ImageFont.FreeTypeFont):
            self._draw.text((x, y), text, font=font, fill=fill, anchor="ls")
        else:
            # Bitmap fonts only draw from the top left
            ascent = font.getbbox("M")[3]
            self._draw.text((x, y - ascent), text, font=font, fill=fill)

    def to_array(self) -> np.ndarray:
        """(H, W, 3) uint8 RGB copy of the surface."""
        return np.array(self.image, dtype=np.uint8)

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path)
        return path


class PygameSurface:
    """pygame Surface used as a drawing surface."""

    def __init__(
        self,
        width: int,
        height: int,
        font_name: str = "Georgia",
        background: int = 255,
        ink: int = 0,
    ):
        if not pygame.font.get_init():
            pygame.font.init()
        self.font_name = font_name
        self.background = background
        self.ink = ink
        self._fonts: dict[int, pygame.font.Font] = {}
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.surface = pygame.Surface((self.width, self.height))
        self.clear()

    def clear(self) -> None:
        self.surface.fill((self.background,) * 3)

    def font(self, size: float) -> pygame.font.Font:
        px = _font_px(size)
        font = self._fonts.get(px)
        if font is None:
            # SysFont falls back to pygame's default font if the name is unknown
            font = pygame.font.SysFont(self.font_name, px)
            self._fonts[px] = font
        return font

    def text_width(self, text: str, size: float) -> float:
        return float(self.font(size).size(text)[0])

    def draw_text(self, text: str, x: float, y: float, size: float, alpha: float) -> None:
        font = self.font(size)
        glyph = font.render(text, True, (self.ink,) * 3)
        glyph.set_alpha(int(round(alpha)))
        # pygame blits from the top-left; shift up so y is the baseline
        self.surface.blit(glyph, (round(x), round(y - font.get_ascent())))

    def to_array(self) -> np.ndarray:
        """Convert to (H, W, 3) numpy array."""
        # pygame uses (width, height) but numpy expects (height, width)
        arr = pygame.surfarray.array3d(self.surface)
        return np.transpose(arr, (1, 0, 2))
