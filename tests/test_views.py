import unittest

from quizrunner.models import Question
from quizrunner.ui.multiple_choice import MultipleChoice, option_label
from quizrunner.ui.ox_quiz import OXQuiz
from quizrunner.ui.progress_bar import ProgressBar
from quizrunner.ui.result_screen import ResultScreen
from quizrunner.models import AnswerRecord
from quizrunner.results import build_summary
from quizrunner.scoring import GradingPolicy

MC = Question(prompt="Red planet?", options=("Venus", "Mars", "Jupiter", "Mercury"), correct_answer="Mars")
OX = Question(prompt="Bats are mammals.", correct_answer="O")


class MultipleChoiceTests(unittest.TestCase):
    def test_labels(self) -> None:
        self.assertEqual([option_label(i) for i in range(6)], ["A", "B", "C", "D", "5", "6"])

    def test_render_lists_options(self) -> None:
        text = MultipleChoice().render(MC)
        self.assertIn("Red planet?", text)
        self.assertIn("B. Mars", text)

    def test_parse_letter_and_number(self) -> None:
        view = MultipleChoice()
        view.render(MC)
        self.assertEqual(view.select("b", MC), "Mars")
        self.assertEqual(view.select(" 3 ", MC), "Jupiter")
        self.assertIsNone(view.select("", MC))
        self.assertIsNone(view.select("9", MC))
        self.assertIsNone(view.select("Z", MC))

    def test_result_locks_view(self) -> None:
        view = MultipleChoice()
        view.render(MC)
        text = view.show_result(MC, "Venus")
        self.assertIn("A. Venus [wrong]", text)
        self.assertIn("B. Mars [correct]", text)
        self.assertTrue(view.is_locked)
        self.assertIsNone(view.select("a", MC))
        view.render(MC)
        self.assertFalse(view.is_locked)


class OXQuizTests(unittest.TestCase):
    def test_normalizes_input(self) -> None:
        view = OXQuiz()
        view.render(OX)
        for raw, expected in (("o", "O"), ("O", "O"), ("yes", "O"), ("x", "X"), ("False", "X")):
            self.assertEqual(view.select(raw, OX), expected)
        self.assertIsNone(view.select("maybe", OX))

    def test_result(self) -> None:
        text = OXQuiz().show_result(OX, "X")
        self.assertIn("[correct]", text.splitlines()[0])
        self.assertIn("[wrong]", text.splitlines()[1])


class ProgressBarTests(unittest.TestCase):
    def test_steps_and_fill(self) -> None:
        bar = ProgressBar(width=10)
        bar.render(4)
        self.assertTrue(bar.as_text().endswith(">..."))
        bar.update(0)
        self.assertEqual(bar.fill, 25)
        bar.mark_step(0, True)
        bar.update(1)
        bar.mark_step(1, False)
        self.assertTrue(bar.as_text().endswith("ox.."))
        self.assertEqual(bar.fill, 50)
        bar.complete()
        self.assertEqual(bar.fill, 100)
        self.assertIn("##########", bar.as_text())

    def test_mark_out_of_range_ignored(self) -> None:
        bar = ProgressBar()
        bar.render(1)
        bar.mark_step(5, True)
        self.assertEqual(bar.step_marker(5), ".")


class ResultScreenTests(unittest.TestCase):
    def test_render_and_details(self) -> None:
        wrong = AnswerRecord(question_index=1, question=MC, user_answer="Venus", is_correct=False)
        right = AnswerRecord(question_index=0, question=MC, user_answer="Mars", is_correct=True)
        summary = build_summary(2, 1, 50, GradingPolicy().resolve(50), (right, wrong))
        screen = ResultScreen()
        text = screen.render(summary)
        self.assertIn("Grade B", text)
        self.assertIn("50 points", text)
        self.assertIn("Incorrect: 1", text)
        details = screen.render_details(summary.answers)
        self.assertIn("Q2. Red planet?", details)
        self.assertIn("Your answer: Venus", details)
        self.assertIn("Correct answer: Mars", details)
        self.assertEqual(screen.render_details((right,)), "")


if __name__ == "__main__":
    unittest.main()
