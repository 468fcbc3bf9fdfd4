"""
Student Rows - synthetic rows for the `student` table

Each row is drawn from an explicit random.Random so a fixed seed
reproduces the same data. Rows are yielded lazily; callers stream them.
"""
from __future__ import annotations

import logging
import math
import random
from typing import Iterator, Literal, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# ============================================
# Generation constants
# ============================================

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwzyx0123456789"
NAME_LENGTH = 8
MAX_AGE = 40      # exclusive
MAX_SCORE = 5.0   # exclusive


class StudentRow(BaseModel):
    """One synthetic student record"""
    id: int = Field(..., ge=0, description="Sequential 0-based row id")
    name: str = Field(..., min_length=NAME_LENGTH, max_length=NAME_LENGTH,
                      pattern=r"^[A-Za-z0-9]+$")
    age: int = Field(..., ge=0, lt=MAX_AGE)
    sex: Literal["M", "F"]
    score: float = Field(..., ge=0.0, lt=MAX_SCORE)


def random_str(length: int, rng: random.Random) -> str:
    """Draw `length` characters uniformly from ALPHABET."""
    return "".join(rng.choice(ALPHABET) for _ in range(length))


def make_row(index: int, rng: random.Random) -> StudentRow:
    # Draw order is fixed: name, age, sex, score
    name = random_str(NAME_LENGTH, rng)
    # Products of random() near 1.0 can round up to the exclusive bound
    age = min(int(rng.random() * MAX_AGE), MAX_AGE - 1)
    sex = "M" if rng.random() > 0.5 else "F"
    score = min(rng.random() * MAX_SCORE, math.nextafter(MAX_SCORE, 0.0))
    return StudentRow(id=index, name=name, age=age, sex=sex, score=score)


def generate_rows(count: int, rng: Optional[random.Random] = None) -> Iterator[StudentRow]:
    """
    Yield `count` student rows with ids 0..count-1

    Args:
        count: Number of rows; zero or negative yields nothing
        rng: Random source; a fresh unseeded one is used when omitted

    Yields:
        StudentRow, in id order
    """
    if rng is None:
        rng = random.Random()
    logger.debug("Generating %d student rows", max(count, 0))
    for i in range(count):
        yield make_row(i, rng)
