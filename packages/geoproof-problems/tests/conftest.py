"""Shared fixtures: sessions on a fixed 800x600 canvas."""
import pytest

from geoproof_draw import Shape
from geoproof_problems import ProblemSession, create

WIDTH, HEIGHT = 800, 600


@pytest.fixture
def open_session():
    """Factory: a fresh session for a problem id."""

    def _open(problem_id, width=WIDTH, height=HEIGHT):
        return ProblemSession(create(problem_id, width, height))

    return _open


@pytest.fixture
def drag_to():
    """Grab the marker registered under ``key`` and release it at ``to``."""

    def _drag(session, key, to):
        did = session.registry.first(key)
        start = session.scene.get(did, Shape).anchor
        assert session.pointer_down(start)
        session.pointer_move(to)
        session.pointer_up()

    return _drag
