from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path
from typing import List, Sequence, Tuple

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .catalog import new_catalog
from .errors import InvalidProblemError, ProgressFileError
from .models import MathOp, Problem

logger = logging.getLogger(__name__)

_MAX_SECONDS = timedelta.max.total_seconds()


class ProblemRecord(BaseModel):
    """On-disk form of a Problem. The answer is recomputed on load."""

    operands: Tuple[int, int]
    operator: MathOp
    num_wrong: int = Field(default=0, ge=0)
    latest_time: float = Field(
        ge=0, le=_MAX_SECONDS, allow_inf_nan=False, description="seconds"
    )

    @classmethod
    def from_problem(cls, problem: Problem) -> "ProblemRecord":
        return cls(
            operands=problem.operands,
            operator=problem.operator,
            num_wrong=problem.num_wrong,
            latest_time=problem.latest_time.total_seconds(),
        )

    def to_problem(self) -> Problem:
        return Problem(
            operands=self.operands,
            operator=self.operator,
            num_wrong=self.num_wrong,
            latest_time=timedelta(seconds=self.latest_time),
        )


_RECORDS = TypeAdapter(List[ProblemRecord])


def dumps(problems: Sequence[Problem]) -> bytes:
    records = [ProblemRecord.from_problem(p) for p in problems]
    return _RECORDS.dump_json(records, indent=2)


def loads(data: str | bytes) -> List[Problem]:
    try:
        records = _RECORDS.validate_json(data)
    except ValidationError as exc:
        raise ProgressFileError(f"Invalid progress data: {exc}") from exc

    problems: List[Problem] = []
    for idx, record in enumerate(records):
        try:
            problems.append(record.to_problem())
        except (InvalidProblemError, OverflowError) as exc:
            raise ProgressFileError(f"Record {idx} is not a valid problem: {exc}") from exc
    return problems


def save_progress(problems: Sequence[Problem], path: Path) -> None:
    logger.info("Saving progress to %s", path)
    Path(path).write_bytes(dumps(problems))


def load_progress(path: Path) -> List[Problem]:
    """Read a saved catalog. A missing file raises FileNotFoundError."""
    path = Path(path)
    data = path.read_bytes()
    logger.info("Reading progress from %s", path)
    try:
        return loads(data)
    except ProgressFileError as exc:
        raise ProgressFileError(f"{path}: {exc}") from exc


def load_or_init(path: Path) -> List[Problem]:
    try:
        return load_progress(path)
    except FileNotFoundError:
        logger.warning("Unable to open progress file %s - resetting.", path)
        return new_catalog()
