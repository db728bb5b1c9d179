import json
import tempfile
import unittest
from pathlib import Path

from quizrunner.app.quiz_types import UnknownQuizTypeError, get_quiz_type, is_binary_type, list_quiz_types
from quizrunner.data import DataLoader, DataLoadError

REPO_DATA = Path(__file__).resolve().parent.parent / "data"


class DataLoaderTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)
        self.loader = DataLoader(self.base)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name: str, payload) -> Path:
        p = self.base / name
        p.write_text(json.dumps(payload), encoding="utf-8")
        return p

    def test_load_multiple_choice(self) -> None:
        self._write(
            "multiple-choice.json",
            {
                "title": "T",
                "questions": [
                    {"question": "Q1", "options": ["a", "b"], "correctAnswer": "b", "explanation": "why"},
                ],
            },
        )
        qset = self.loader.load_quiz("multiple-choice")
        self.assertEqual(qset.title, "T")
        q = qset.questions[0]
        self.assertEqual(q.prompt, "Q1")
        self.assertEqual(q.options, ("a", "b"))
        self.assertEqual(q.correct_answer, "b")
        self.assertEqual(q.explanation, "why")
        self.assertFalse(q.is_binary)

    def test_load_ox_list_payload(self) -> None:
        self._write("ox-quiz.json", [{"question": "Q", "correctAnswer": "X"}])
        qset = self.loader.load_quiz("ox")
        self.assertTrue(qset.questions[0].is_binary)
        self.assertIsNone(qset.questions[0].explanation)

    def test_cache_until_cleared(self) -> None:
        p = self._write("set.json", {"questions": [{"question": "Q", "correctAnswer": "O"}]})
        first = self.loader.load("set.json")
        p.write_text(json.dumps({"questions": []}), encoding="utf-8")
        self.assertIs(self.loader.load("set.json"), first)
        self.loader.clear_cache()
        self.assertEqual(len(self.loader.load("set.json")), 0)

    def test_absolute_path(self) -> None:
        p = self._write("abs.json", {"questions": []})
        loader = DataLoader("/nonexistent")
        self.assertEqual(len(loader.load(str(p))), 0)

    def test_missing_file(self) -> None:
        with self.assertRaises(DataLoadError):
            self.loader.load("nope.json")

    def test_invalid_json(self) -> None:
        (self.base / "bad.json").write_text("{not json", encoding="utf-8")
        with self.assertRaises(DataLoadError):
            self.loader.load("bad.json")

    def test_non_utf8_file(self) -> None:
        (self.base / "bad.json").write_bytes(b'{"questions": [{"question": "\xff\xfe", "correctAnswer": "O"}]}')
        with self.assertRaises(DataLoadError) as ctx:
            self.loader.load("bad.json")
        self.assertIn("Not UTF-8", str(ctx.exception))

    def test_answer_not_in_options(self) -> None:
        self._write("bad.json", {"questions": [{"question": "Q", "options": ["a"], "correctAnswer": "z"}]})
        with self.assertRaises(DataLoadError):
            self.loader.load("bad.json")

    def test_binary_needs_sentinel(self) -> None:
        self._write("bad.json", {"questions": [{"question": "Q", "correctAnswer": "yes"}]})
        with self.assertRaises(DataLoadError):
            self.loader.load("bad.json")

    def test_empty_prompt_rejected(self) -> None:
        self._write("bad.json", {"questions": [{"question": "", "correctAnswer": "O"}]})
        with self.assertRaises(DataLoadError):
            self.loader.load("bad.json")

    def test_unknown_type(self) -> None:
        with self.assertRaises(UnknownQuizTypeError):
            self.loader.load_quiz("essay")

    def test_bundled_sets_are_valid(self) -> None:
        loader = DataLoader(REPO_DATA)
        self.assertEqual(len(loader.load_quiz("multiple-choice")), 5)
        ox = loader.load_quiz("ox")
        self.assertTrue(all(q.is_binary for q in ox.questions))

    def test_every_listed_type_is_bundled(self) -> None:
        loader = DataLoader(REPO_DATA)
        for meta in list_quiz_types():
            with self.subTest(quiz_type=meta.id):
                qset = loader.load_quiz(meta.id)
                self.assertGreater(len(qset), 0)
                self.assertTrue(all(q.is_binary == meta.is_binary for q in qset.questions))


class QuizTypeTests(unittest.TestCase):
    def test_binary_types(self) -> None:
        self.assertTrue(is_binary_type("ox"))
        self.assertTrue(is_binary_type("haircare-ox"))
        self.assertFalse(is_binary_type("haircare"))
        self.assertFalse(is_binary_type("multiple-choice"))

    def test_files(self) -> None:
        self.assertEqual(get_quiz_type("ox").filename, "ox-quiz.json")
        self.assertEqual(get_quiz_type("event-ox").filename, "event-ox.json")
        self.assertEqual(get_quiz_type("multiple-choice").label, "Multiple choice")


if __name__ == "__main__":
    unittest.main()
