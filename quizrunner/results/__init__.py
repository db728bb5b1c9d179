from .summary import ResultSummary, build_summary, summarize

__all__ = ["ResultSummary", "build_summary", "summarize"]
