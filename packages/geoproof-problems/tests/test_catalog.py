"""Tests for the problem catalog, run end to end through a session."""
import pytest

from geoproof_problems import PROBLEMS, ProblemSession, create, list_problems

IDS = [
    "ellipse-ratio",
    "semicircle-perpendicular",
    "square-similarity",
    "min-perimeter",
    "set-intersection",
]


class TestCatalog:
    def test_lists_every_problem(self):
        assert [entry["id"] for entry in list_problems()] == IDS
        assert all(entry["name"] for entry in list_problems())

    def test_create(self):
        problem = create("min-perimeter", 640, 480)
        assert problem.id == "min-perimeter"
        assert problem.width == 640

    def test_unknown_id(self):
        with pytest.raises(KeyError):
            create("no-such-problem")


@pytest.mark.parametrize("problem_id", IDS)
class TestEveryProblem:
    def test_five_steps(self, open_session, problem_id):
        session = open_session(problem_id)
        assert session.step_count == 5
        assert all(step.title and step.explanation for step in session.steps.steps)

    def test_step_keys_are_disjoint(self, open_session, problem_id):
        session = open_session(problem_id)
        seen = set()
        for step in session.steps.steps:
            assert not seen & step.element_keys
            seen |= step.element_keys

    def test_last_step_registers_every_key(self, open_session, problem_id):
        session = open_session(problem_id)
        session.select_step(5)
        for step in session.steps.steps:
            assert step.element_keys <= set(session.registry.keys())

    def test_animation_settles(self, open_session, problem_id):
        session = open_session(problem_id)
        for index in range(1, 6):
            session.select_step(index)
            session.engine.run_for_ms(5000)
            assert not session.steps.animating

    def test_back_to_zero_empties_scene(self, open_session, problem_id):
        session = open_session(problem_id)
        session.select_step(5)
        session.select_step(0)
        assert len(session.registry) == 0
        assert session.scene.drawables() == frozenset()

    def test_clear_mid_animation(self, open_session, problem_id):
        session = open_session(problem_id)
        session.select_step(5)
        session.tick()
        session.clear()
        assert session.scene.drawables() == frozenset()
        assert session.problem.id in PROBLEMS

    def test_readouts_are_strings(self, open_session, problem_id):
        session = open_session(problem_id)
        for index in range(0, 6):
            session.select_step(index)
            assert all(isinstance(v, str) for v in session.readouts().values())
