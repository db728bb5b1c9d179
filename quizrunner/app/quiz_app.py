from __future__ import annotations

"""Quiz application: drives the engine through a text UI.

The UI is a dict of callbacks, the same shape the CLI builds:

- ``ask(prompt) -> str`` reads one line of input
- ``inform(message)`` shows text to the user
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from ..data.loader import DataLoader
from ..engine.quiz_engine import QuizEngine
from ..models import AnswerRecord, CompletionResult, Question, QuestionSet
from ..results.history import save_attempt
from ..results.summary import ResultSummary, summarize
from ..scoring.grading import GradingPolicy
from ..ui.base_view import QuestionView
from ..ui.multiple_choice import MultipleChoice
from ..ui.ox_quiz import OXQuiz
from ..ui.progress_bar import ProgressBar
from ..ui.result_screen import ResultScreen
from ..util.randomness import pick_questions
from .explain import trace as xtrace
from .quiz_types import get_quiz_type

UI = Dict[str, Callable[..., Any]]

QUIT_WORDS = {"q", "quit"}


class QuizAborted(Exception):
    """The user quit in the middle of an attempt."""


class QuizApp:
    def __init__(self, cfg: Dict[str, Any], *, loader: Optional[DataLoader] = None) -> None:
        self.cfg = cfg
        self.loader = loader or DataLoader(cfg.get("data", {}).get("base_path", "./data"))
        self.policy = GradingPolicy(cfg.get("grades"))
        self.quiz_type = cfg.get("data", {}).get("default_type", "multiple-choice")
        self.question_set: Optional[QuestionSet] = None
        self.engine: Optional[QuizEngine] = None
        self.views: Dict[bool, QuestionView] = {False: MultipleChoice(), True: OXQuiz()}
        self.view: QuestionView = self.views[False]
        self.progress = ProgressBar()
        self.result_screen = ResultScreen()
        self.summary: Optional[ResultSummary] = None
        self._ui: UI = {}
        self._started_at: Optional[datetime] = None

    def load(self, quiz_type: Optional[str] = None) -> QuestionSet:
        """Load the question set registered for ``quiz_type``."""
        self.quiz_type = quiz_type or self.quiz_type
        meta = get_quiz_type(self.quiz_type)
        return self._use(self.loader.load(meta.filename))

    def load_file(self, path: str, quiz_type: Optional[str] = None) -> QuestionSet:
        """Load an explicit question-set file.

        Without ``quiz_type`` the set is recorded as ``ox`` when none of its
        questions has options. Each question is still shown with the view
        matching its own shape.
        """
        qset = self.loader.load(path)
        if quiz_type is not None:
            self.quiz_type = get_quiz_type(quiz_type).id
        else:
            binary = bool(qset.questions) and all(q.is_binary for q in qset.questions)
            self.quiz_type = "ox" if binary else "multiple-choice"
        return self._use(qset)

    def _use(self, qset: QuestionSet) -> QuestionSet:
        quiz_cfg = self.cfg.get("quiz", {})
        picked = pick_questions(
            qset.questions,
            shuffle=bool(quiz_cfg.get("shuffle_questions", False)),
            limit=quiz_cfg.get("max_questions"),
        )
        self.question_set = QuestionSet(questions=tuple(picked), title=qset.title)
        return self.question_set

    def view_for(self, question: Question) -> QuestionView:
        """O/X view for questions without options, multiple choice otherwise."""
        self.view = self.views[question.is_binary]
        return self.view

    def label(self) -> str:
        return get_quiz_type(self.quiz_type).label

    def new_engine(self) -> QuizEngine:
        """A fresh engine over the loaded questions with handlers wired."""
        questions = self.question_set.questions if self.question_set else ()
        engine = QuizEngine(questions)
        engine.on_question_change(self._handle_question_change)
        engine.on_answer_submit(self._handle_answer_submit)
        engine.on_complete(self._handle_complete)
        self.engine = engine
        return engine

    def run(self, ui: UI) -> Optional[ResultSummary]:
        """Play attempts until the user declines a retry; returns the last summary."""
        if self.question_set is None:
            self.load()
        ui["inform"](f"{self.label()} quiz" + (f": {self.question_set.title}" if self.question_set.title else ""))
        last: Optional[ResultSummary] = None
        while True:
            try:
                last = self.play(ui)
            except QuizAborted:
                ui["inform"]("Quiz cancelled.")
                return last
            answer = ui["ask"]("Try again? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                return last

    def play(self, ui: UI) -> ResultSummary:
        """Run one attempt from the first question to the results screen."""
        self._ui = ui
        self.summary = None
        engine = self.new_engine()
        self._inform(self.progress.render(engine.total_questions()))
        self._started_at = datetime.now(timezone.utc)
        engine.start()

        while not engine.is_completed:
            question = engine.current_question()
            if question is not None:
                answer = self._ask_answer(question)
                engine.submit_answer(answer)
                self._inform(self.view_for(question).show_result(question, answer))
            engine.next()

        assert self.summary is not None
        return self.summary

    def _inform(self, msg: str) -> None:
        if msg:
            self._ui["inform"](msg)

    def _ask_answer(self, question: Question) -> Any:
        view = self.view_for(question)
        while True:
            raw = self._ui["ask"](view.prompt())
            if raw.strip().lower() in QUIT_WORDS:
                raise QuizAborted()
            value = view.select(raw, question)
            if value is not None:
                return value
            self._inform("Please choose an answer.")

    def _handle_question_change(self, question: Optional[Question], index: int) -> None:
        if question is None:
            return
        assert self.engine is not None
        self._inform(f"\nQuestion {index + 1} / {self.engine.total_questions()}")
        self._inform(self.progress.update(index))
        self._inform(self.view_for(question).render(question))

    def _handle_answer_submit(self, record: AnswerRecord) -> None:
        self.progress.mark_step(record.question_index, record.is_correct)
        quiz_cfg = self.cfg.get("quiz", {})
        if not quiz_cfg.get("show_feedback", True):
            return
        self._inform("Correct!" if record.is_correct else "Incorrect.")
        if quiz_cfg.get("show_explanation", True) and record.question.explanation:
            self._inform(record.question.explanation)

    def _handle_complete(self, result: CompletionResult) -> None:
        summary = summarize(result, self.policy)
        self.summary = summary
        self._inform(self.progress.complete())
        self._inform("\n" + self.result_screen.render(summary))
        self._inform(self.result_screen.render_details(summary.answers))
        self._persist(summary)

    def _persist(self, summary: ResultSummary) -> None:
        stats = self.cfg.get("stats", {})
        if not stats.get("enabled", True) or summary.total_questions == 0:
            return
        try:
            save_attempt(
                summary,
                quiz_type=self.quiz_type,
                started_at=self._started_at or datetime.now(timezone.utc),
                data_dir=stats.get("data_dir", "./storage/data"),
            )
        except (OSError, ValueError) as exc:
            print(f"[WARN] Could not save attempt history: {exc}")
        xtrace("attempt_finished", {"quiz_type": self.quiz_type, "score": summary.score})
