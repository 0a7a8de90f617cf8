"""
Kinesthetic learning style.
"""

from adaptlearn.content.models import LessonContent
from . import LearningStyleType, register


@register(LearningStyleType.KINESTHETIC)
class KinestheticLearningStyle:
    """Style for learners who prefer hands-on practice."""

    description = "Makes the lesson interactive"

    def adapt_content(self, lesson: LessonContent) -> None:
        """Interactive adaptation is not implemented; the lesson is left unchanged."""
        return None

    def __repr__(self) -> str:
        return "KinestheticLearningStyle()"
