from .errors import (
    EmptyCatalogError,
    InvalidProblemError,
    MathQuizError,
    ProgressFileError,
    UnknownQuestionTypeError,
)
from .models import MathOp, Problem
from .selector import select_problem

__all__ = [
    "MathOp",
    "Problem",
    "select_problem",
    "MathQuizError",
    "InvalidProblemError",
    "EmptyCatalogError",
    "UnknownQuestionTypeError",
    "ProgressFileError",
]
