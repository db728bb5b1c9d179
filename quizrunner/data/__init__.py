from .loader import DataLoader, DataLoadError
from .schema import QuestionModel, QuestionSetModel

__all__ = ["DataLoader", "DataLoadError", "QuestionModel", "QuestionSetModel"]
