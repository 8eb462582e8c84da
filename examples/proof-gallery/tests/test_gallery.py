"""Tests for routing viewer input to the open session."""
import pygame
import pytest

from main import Gallery
from ui.constants import PARAM_STEP


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


@pytest.fixture
def gallery():
    return Gallery("ellipse-ratio", 60, (800, 600))


class TestHandle:
    def test_step_keys(self, gallery):
        assert gallery.handle(_key(pygame.K_3))
        assert gallery.session.current_step == 3

    def test_keys_after_tab_reach_the_new_problem(self, gallery):
        """Events queued behind Tab in one batch go to the problem Tab opened."""
        old = gallery.session
        old.select_step(2)
        for event in (_key(pygame.K_TAB), _key(pygame.K_4)):
            gallery.handle(event)
        assert gallery.problem_id == "semicircle-perpendicular"
        assert gallery.session is not old
        assert gallery.session.current_step == 4
        assert old.current_step == 0

    def test_tab_wraps_around(self, gallery):
        for _ in range(len(gallery.ids)):
            gallery.handle(_key(pygame.K_TAB))
        assert gallery.problem_id == "ellipse-ratio"

    def test_parameter_keys(self):
        gallery = Gallery("set-intersection", 60, (800, 600))
        omega = gallery.session.problem.parameters()["omega"]
        gallery.handle(_key(pygame.K_RIGHTBRACKET))
        assert gallery.session.problem.parameters()["omega"] == pytest.approx(omega + PARAM_STEP["omega"])

    def test_parameter_keys_ignored_without_parameters(self, gallery):
        assert gallery.handle(_key(pygame.K_PERIOD))
        assert gallery.session.current_step == 0

    def test_quit(self, gallery):
        assert not gallery.handle(_key(pygame.K_ESCAPE))
        assert not gallery.handle(pygame.event.Event(pygame.QUIT))

    def test_drag_with_the_mouse(self, gallery):
        session = gallery.session
        gallery.handle(_key(pygame.K_4))
        gallery.handle(_key(pygame.K_d))
        assert session.drag.enabled
        start = session.problem.config.p
        gallery.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(round(start.x), round(start.y))))
        assert session.drag.grabbed is not None
        gallery.handle(pygame.event.Event(pygame.MOUSEMOTION, pos=(700, 100)))
        gallery.handle(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(700, 100)))
        assert session.drag.grabbed is None
        assert session.problem.config.p != start
