"""Tests for the interactive window, driven headless."""

import pygame
import pytest

from palimpsest.app import ErosionApp


@pytest.fixture
def app():
    app = ErosionApp(width=320, height=240, seed=3)
    yield app
    pygame.quit()


def _text(text):
    return pygame.event.Event(pygame.TEXTINPUT, text=text)


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestErosionApp:
    def test_canvas_leaves_room_for_input(self, app):
        assert app.canvas.height == 240 - ErosionApp.INPUT_HEIGHT
        assert app.canvas.width == 320

    def test_typing_raises_chaos(self, app):
        assert app.handle_event(_text("hello"))
        assert app.text == "hello"
        assert app.session.chaos_level == pytest.approx(5 / 400)

    def test_backspace_keeps_max_chaos(self, app):
        app.handle_event(_text("x" * 40))
        app.handle_event(_key(pygame.K_BACKSPACE))
        assert app.text == "x" * 39
        assert app.session.chaos_level == pytest.approx(39 / 400)
        assert app.session.max_chaos == pytest.approx(40 / 400)

    def test_return_counts_as_input(self, app):
        app.handle_event(_key(pygame.K_RETURN))
        assert app.text == "\n"
        assert app.session.chaos_level == pytest.approx(1 / 400)

    def test_resize(self, app):
        event = pygame.event.Event(pygame.VIDEORESIZE, w=400, h=360, size=(400, 360))
        app.handle_event(event)
        assert (app.canvas.width, app.canvas.height) == (400, 360 - ErosionApp.INPUT_HEIGHT)

    def test_quit_events(self, app):
        assert not app.handle_event(pygame.event.Event(pygame.QUIT))
        assert not app.handle_event(_key(pygame.K_ESCAPE))

    def test_draw(self, app):
        app.handle_event(_text("a translation " * 10))
        assert app.dirty
        app.draw()
        assert not app.dirty

    def test_expose_redraws(self, app):
        app.draw()
        assert app.handle_event(pygame.event.Event(pygame.WINDOWEXPOSED))
        assert app.dirty

    def test_visible_tail_fits(self, app):
        app.set_text("word " * 200)
        tail = app._visible_tail(200)
        assert 0 < len(tail) < len(app.text)
        assert app.input_font.size(tail + "|")[0] <= 200


class TestWithoutInput:
    def test_text_ignored(self):
        app = ErosionApp(width=200, height=160, seed=3, with_input=False)
        try:
            assert app.canvas.height == 160
            app.handle_event(_text("ignored"))
            assert app.text == ""
            assert app.session.max_chaos == 0.0
        finally:
            pygame.quit()
