from __future__ import annotations

"""Command-line interface for quizrunner."""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .. import __version__
from ..config.config import load_config, validate_config
from ..data.loader import DataLoadError
from ..util.randomness import seed_if_needed
from .quiz_app import QuizApp
from .quiz_types import UnknownQuizTypeError, list_quiz_types


def _build_ui() -> Dict[str, Any]:
    def ask(prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError:
            return "q"

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform}


def _cmd_history(cfg: Dict[str, Any], limit: int, export: str | None = None) -> int:
    from storage.store import export_ndjson, load_attempts

    df = load_attempts(Path(cfg["stats"]["data_dir"]))
    if df.empty:
        print("No attempts recorded yet.")
        return 0
    if export:
        export_ndjson(df, Path(export))
        print(f"Exported {len(df)} attempts to {export}")
    for row in df.tail(limit).itertuples(index=False):
        started = row.started_at.strftime("%Y-%m-%d %H:%M")
        print(f"{started}  {row.quiz_type:<16} {row.correct}/{row.total}  {row.score:3d}  {row.grade}")
    return 0


def _cmd_report(cfg: Dict[str, Any], outdir: str) -> int:
    from analytics.report import write_reports

    n = write_reports(Path(cfg["stats"]["data_dir"]), Path(outdir))
    if n == 0:
        print("No attempts recorded yet.")
        return 0
    print(f"Reports for {n} attempts saved to: {Path(outdir).resolve()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="quizrunner")
    p.add_argument("--version", action="version", version=f"quizrunner {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list-types")

    rp = sub.add_parser("run")
    rp.add_argument("--config", default=None)
    rp.add_argument("--type", dest="quiz_type", default=None, help="Quiz type (see list-types)")
    rp.add_argument("--data-dir", default=None, help="Directory holding the question-set JSON files")
    rp.add_argument("--file", default=None, help="Question-set JSON file to use instead of the type's default")
    rp.add_argument("--questions", type=int, default=None, help="Ask at most this many questions")
    rp.add_argument("--shuffle", action="store_true")
    rp.add_argument("--no-stats", dest="stats_enabled", action="store_false")
    rp.set_defaults(stats_enabled=None)
    rp.add_argument("--explain", action="store_true")

    hp = sub.add_parser("history")
    hp.add_argument("--config", default=None)
    hp.add_argument("--limit", type=int, default=10)
    hp.add_argument("--export", default=None, help="Also write all attempts as NDJSON to this path")

    rep = sub.add_parser("report")
    rep.add_argument("--config", default=None)
    rep.add_argument("--out", default="reports")

    args = p.parse_args(argv)

    if args.cmd == "list-types":
        for m in list_quiz_types():
            style = "O/X" if m.is_binary else "multiple choice"
            print(f"{m.id}: {m.label} ({style}) | file: {m.filename}")
        return 0

    cfg = validate_config(load_config(args.config))

    if args.cmd == "history":
        return _cmd_history(cfg, args.limit, args.export)

    if args.cmd == "report":
        return _cmd_report(cfg, args.out)

    if args.cmd == "run":
        seed_if_needed()
        if args.explain:
            from .explain import enable as explain_enable
            explain_enable(True)
        if args.data_dir is not None:
            cfg["data"]["base_path"] = args.data_dir
        if args.questions is not None:
            cfg["quiz"]["max_questions"] = args.questions if args.questions > 0 else None
        if args.shuffle:
            cfg["quiz"]["shuffle_questions"] = True
        if args.stats_enabled is not None:
            cfg["stats"]["enabled"] = bool(args.stats_enabled)

        app = QuizApp(cfg)
        try:
            if args.file:
                app.load_file(args.file, args.quiz_type)
            else:
                app.load(args.quiz_type)
        except (DataLoadError, UnknownQuizTypeError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2

        summary = app.run(_build_ui())
        return 0 if summary is not None else 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
