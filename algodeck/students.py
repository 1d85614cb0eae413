"""Student scores: grading, ranking and writing a ranked report."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

__all__ = ["Student", "grade_for", "sorted_by_score", "write_records"]


def grade_for(average: float) -> str:
    """Letter grade for an average mark."""
    if average >= 90:
        return "A"
    if average >= 75:
        return "B"
    if average >= 60:
        return "C"
    if average >= 40:
        return "D"
    return "F"


@dataclass
class Student:
    """A student and the score they reached."""

    name: str
    score: float = 0.0
    age: int = 0
    roll: int = 0

    @classmethod
    def from_marks(
        cls, name: str, marks: Sequence[float], roll: int = 0, age: int = 0
    ) -> Student:
        """A student whose score is the mean of their subject marks."""
        if not marks:
            raise ValueError("at least one mark is needed")
        return cls(name, sum(marks) / len(marks), age, roll)

    @property
    def grade(self) -> str:
        return grade_for(self.score)


def sorted_by_score(students: Iterable[Student]) -> list[Student]:
    """Students from highest to lowest score."""
    return sorted(students, key=lambda student: student.score, reverse=True)


def write_records(students: Iterable[Student], stream: TextIO) -> None:
    """Write the students ranked by score, one line each."""
    stream.write("Sorted Student Records (by Score):\n")
    for student in sorted_by_score(students):
        stream.write(f"{student.name}, Age: {student.age}, Score: {student.score:.2f}\n")