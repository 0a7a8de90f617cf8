"""
Base protocol for learning styles.
"""

from typing import Protocol

from adaptlearn.content.models import LessonContent


class LearningStyle(Protocol):
    """Protocol for learning style strategies."""

    kind: str
    description: str

    def adapt_content(self, lesson: LessonContent) -> None:
        """Transform the lesson in place for this style."""
        ...
