import json
import tempfile
import unittest
from pathlib import Path

from quizrunner.app.quiz_app import QuizApp
from quizrunner.config.config import validate_config
from storage.store import load_answers, load_attempts

from tests.helpers import scripted_ui


def _cfg(base: Path, **quiz):
    cfg = validate_config({"data": {"base_path": str(base)}, "quiz": dict(quiz), "stats": {"enabled": False}})
    return cfg


class QuizAppTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)
        mc = {
            "questions": [
                {"question": f"Q{i}", "options": ["a", "b", "c", "d"], "correctAnswer": "a", "explanation": f"E{i}"}
                for i in range(5)
            ]
        }
        (self.base / "multiple-choice.json").write_text(json.dumps(mc), encoding="utf-8")
        ox = {"questions": [{"question": "S1", "correctAnswer": "O"}, {"question": "S2", "correctAnswer": "X"}]}
        (self.base / "ox-quiz.json").write_text(json.dumps(ox), encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_multiple_choice_attempt(self) -> None:
        app = QuizApp(_cfg(self.base))
        app.load("multiple-choice")
        ui, shown, _ = scripted_ui(["a", "A", "b", "1", "d", "n"])
        summary = app.run(ui)
        self.assertEqual((summary.correct_count, summary.score, summary.grade), (3, 60, "B"))
        self.assertEqual(summary.incorrect_count, 2)
        text = "\n".join(shown)
        self.assertIn("Question 5 / 5", text)
        self.assertIn("Mistake notes:", text)
        self.assertIn("E2", text)

    def test_invalid_input_reprompts(self) -> None:
        app = QuizApp(_cfg(self.base))
        app.load("ox")
        ui, shown, prompts = scripted_ui(["", "maybe", "o", "x", "n"])
        summary = app.run(ui)
        self.assertEqual(summary.score, 100)
        self.assertEqual(shown.count("Please choose an answer."), 2)
        self.assertEqual(prompts.count("O or X? "), 4)

    def test_retry_builds_fresh_engine(self) -> None:
        app = QuizApp(_cfg(self.base))
        app.load("ox")
        ui, _, _ = scripted_ui(["x", "o", "y", "o", "x", "n"])
        first_engine = []
        original = app.new_engine

        def tracking():
            engine = original()
            first_engine.append(engine)
            return engine

        app.new_engine = tracking
        summary = app.run(ui)
        self.assertEqual(len(first_engine), 2)
        self.assertIsNot(first_engine[0], first_engine[1])
        self.assertEqual(first_engine[0].result().score, 0)
        self.assertEqual(summary.score, 100)
        self.assertEqual(first_engine[0].questions, first_engine[1].questions)

    def test_quit_mid_quiz(self) -> None:
        app = QuizApp(_cfg(self.base))
        app.load("ox")
        ui, shown, _ = scripted_ui(["o", "q"])
        self.assertIsNone(app.run(ui))
        self.assertIn("Quiz cancelled.", shown)

    def test_max_questions(self) -> None:
        app = QuizApp(_cfg(self.base, max_questions=2))
        qset = app.load("multiple-choice")
        self.assertEqual(len(qset), 2)
        ui, _, _ = scripted_ui(["a", "a"])
        self.assertEqual(app.play(ui).total_questions, 2)

    def test_load_file_infers_binary(self) -> None:
        app = QuizApp(_cfg(self.base))
        app.load_file(str(self.base / "ox-quiz.json"))
        self.assertEqual(app.quiz_type, "ox")
        ui, _, prompts = scripted_ui(["o", "x"])
        app.play(ui)
        self.assertEqual(prompts, ["O or X? ", "O or X? "])

    def test_mixed_set_uses_view_per_question(self) -> None:
        mixed = {
            "questions": [
                {"question": "M1", "options": ["a", "b"], "correctAnswer": "a"},
                {"question": "S1", "correctAnswer": "O"},
            ]
        }
        path = self.base / "mixed.json"
        path.write_text(json.dumps(mixed), encoding="utf-8")
        app = QuizApp(_cfg(self.base))
        app.load_file(str(path))
        self.assertEqual(app.quiz_type, "multiple-choice")
        ui, _, prompts = scripted_ui(["a", "o", "n"])
        summary = app.run(ui)
        self.assertEqual((summary.correct_count, summary.score), (2, 100))
        self.assertEqual(prompts, ["Your answer (letter or number): ", "O or X? ", "Try again? [y/N] "])

    def test_type_override_keeps_question_shape(self) -> None:
        app = QuizApp(_cfg(self.base))
        app.load_file(str(self.base / "multiple-choice.json"), "ox")
        self.assertEqual(app.quiz_type, "ox")
        ui, _, prompts = scripted_ui(["a"] * 5)
        self.assertEqual(app.play(ui).score, 100)
        self.assertEqual(set(prompts), {"Your answer (letter or number): "})

    def test_empty_question_set(self) -> None:
        (self.base / "event.json").write_text(json.dumps({"questions": []}), encoding="utf-8")
        app = QuizApp(_cfg(self.base))
        app.load("event")
        ui, _, _ = scripted_ui([])
        summary = app.play(ui)
        self.assertEqual((summary.total_questions, summary.score, summary.grade), (0, 0, "D"))

    def test_feedback_can_be_disabled(self) -> None:
        app = QuizApp(_cfg(self.base, show_feedback=False))
        app.load("ox")
        ui, shown, _ = scripted_ui(["o", "o"])
        app.play(ui)
        self.assertNotIn("Correct!", shown)
        self.assertNotIn("Incorrect.", shown)

    def test_attempt_is_saved(self) -> None:
        cfg = _cfg(self.base)
        stats_dir = self.base / "stats"
        cfg["stats"] = {"enabled": True, "data_dir": str(stats_dir)}
        app = QuizApp(cfg)
        app.load("ox")
        ui, _, _ = scripted_ui(["o", "o"])
        app.play(ui)
        attempts = load_attempts(stats_dir)
        self.assertEqual(len(attempts), 1)
        row = attempts.iloc[0]
        self.assertEqual((row["quiz_type"], int(row["total"]), int(row["correct"]), int(row["score"])), ("ox", 2, 1, 50))
        answers = load_answers(stats_dir)
        self.assertEqual(list(answers["is_correct"]), [True, False])


if __name__ == "__main__":
    unittest.main()
