from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path

PROGRESS_FILE = Path(os.getenv("MATH_QUIZ_PROGRESS_FILE", "math_quiz.ini"))

LOG_LEVEL = os.getenv("MATH_QUIZ_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# operands and answers fit in a byte
MAX_OPERAND = 255
MAX_ANSWER = 255

# one wrong answer weighs as much as thirty seconds of solve time
WRONG_ANSWER_WEIGHT = 30

# seeded solve times for freshly generated problems
ADDITION_SEED_TIME = timedelta(seconds=5)
SUBTRACTION_SEED_TIME = timedelta(seconds=10)
MULTIPLICATION_SEED_TIME = timedelta(seconds=15)

# drill stopping rules
MAX_QUESTIONS = 30
STREAK_TARGET = 5
FAST_ANSWER_SECONDS = 2
