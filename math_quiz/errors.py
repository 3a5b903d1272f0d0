from __future__ import annotations


class MathQuizError(Exception):
    """Base class for all errors raised by math_quiz."""


class InvalidProblemError(MathQuizError, ValueError):
    """Operands/operator do not describe a supported arithmetic fact."""


class EmptyCatalogError(MathQuizError, ValueError):
    """A selection was requested from a catalog with no problems."""


class UnknownQuestionTypeError(MathQuizError, ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Unknown question type: {text!r}")
        self.text = text


class ProgressFileError(MathQuizError):
    """The progress file exists but cannot be parsed into problems."""
