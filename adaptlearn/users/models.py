"""
Learner model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adaptlearn.styles.base import LearningStyle


class User:
    """
    A learner with one learning style and an ordered completion history.

    Users compare equal when their names match, whatever their style or
    history.
    """

    def __init__(self, name: str, learning_style: LearningStyle):
        self._name = name
        self._learning_style = learning_style
        self._completed_lessons: list[int] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def learning_style(self) -> LearningStyle:
        return self._learning_style

    def complete_lesson(self, lesson_id: int) -> None:
        """Record a completion. Repeats are appended, not merged."""
        self._completed_lessons.append(lesson_id)

    @property
    def completed_lessons(self) -> list[int]:
        """Completed lesson ids in completion order."""
        return list(self._completed_lessons)

    def has_completed(self, lesson_id: int) -> bool:
        return lesson_id in self._completed_lessons

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"User(name={self._name!r}, style={self._learning_style!r})"
