"""
Interactive erosion window.

The paragraph canvas sits above a text field. Typing erodes the text;
deleting never brings it back. The window only redraws when an event
arrives.
"""

import pygame

from palimpsest.config import ErosionConfig
from palimpsest.paragraph import PARAGRAPH, Paragraph
from palimpsest.session import ErosionSession
from palimpsest.surfaces import PygameSurface


class ErosionApp:
    """pygame front end for an ErosionSession."""

    INPUT_HEIGHT = 120
    INPUT_MARGIN = 16
    INPUT_BG = (244, 244, 240)
    INPUT_BORDER = (200, 200, 195)
    INPUT_INK = (40, 40, 40)

    def __init__(
        self,
        width: int = 1280,
        height: int = 800,
        paragraph: Paragraph = PARAGRAPH,
        config: ErosionConfig | None = None,
        seed: int | None = None,
        with_input: bool = True,
    ):
        self.cfg = config or ErosionConfig()
        self.with_input = with_input

        pygame.init()
        pygame.display.set_caption("palimpsest")
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

        self.canvas = PygameSurface(
            width,
            self._canvas_height(height),
            font_name=self.cfg.font_name,
            background=self.cfg.background,
            ink=self.cfg.ink,
        )
        self.session = ErosionSession(self.canvas, paragraph, self.cfg, seed=seed)

        self.text = ""
        self.input_font = pygame.font.SysFont(self.cfg.font_name, 22)
        self.dirty = True

        if with_input:
            pygame.key.start_text_input()

    def _canvas_height(self, height: int) -> int:
        if not self.with_input:
            return height
        return max(0, height - self.INPUT_HEIGHT)

    def set_text(self, text: str):
        self.text = text
        self.session.on_input_changed(len(text))
        self.dirty = True

    def resize(self, width: int, height: int):
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.session.on_resize(width, self._canvas_height(height))
        self.dirty = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Dispatch one event.

        Returns:
            False when the app should quit.
        """
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.WINDOWEXPOSED:
            self.dirty = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if self.with_input and event.key == pygame.K_BACKSPACE:
                self.set_text(self.text[:-1])
            elif self.with_input and event.key == pygame.K_RETURN:
                self.set_text(self.text + "\n")
        elif event.type == pygame.TEXTINPUT and self.with_input:
            self.set_text(self.text + event.text)

        return True

    def _visible_tail(self, max_width: int) -> str:
        """Longest suffix of the typed text that fits on one line."""
        flat = self.text.replace("\n", " ")
        lo, hi = 0, len(flat)
        # Binary search on the start index
        while lo < hi:
            mid = (lo + hi) // 2
            if self.input_font.size(flat[mid:] + "|")[0] <= max_width:
                hi = mid
            else:
                lo = mid + 1
        return flat[lo:]

    def _draw_input(self):
        width, height = self.screen.get_size()
        top = height - self.INPUT_HEIGHT
        box = pygame.Rect(
            self.INPUT_MARGIN,
            top + self.INPUT_MARGIN,
            max(0, width - 2 * self.INPUT_MARGIN),
            max(0, self.INPUT_HEIGHT - 2 * self.INPUT_MARGIN),
        )

        pygame.draw.rect(self.screen, (255, 255, 255), (0, top, width, self.INPUT_HEIGHT))
        pygame.draw.rect(self.screen, self.INPUT_BG, box)
        pygame.draw.rect(self.screen, self.INPUT_BORDER, box, 1)

        pad = 10
        if self.text:
            line = self._visible_tail(box.width - 2 * pad) + "|"
            color = self.INPUT_INK
        else:
            line = "Translate it..."
            color = self.INPUT_BORDER
        rendered = self.input_font.render(line, True, color)
        self.screen.blit(rendered, (box.x + pad, box.centery - rendered.get_height() // 2))

    def draw(self):
        self.screen.blit(self.canvas.surface, (0, 0))
        if self.with_input:
            self._draw_input()
        pygame.display.flip()
        self.dirty = False

    def run(self):
        """Block on events until quit, redrawing only after changes."""
        self.draw()
        running = True
        while running:
            running = self.handle_event(pygame.event.wait())
            if running and self.dirty:
                self.draw()
        pygame.quit()
