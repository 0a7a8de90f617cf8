"""
Auditory learning style.
"""

from adaptlearn.content.models import LessonContent
from . import LearningStyleType, register


@register(LearningStyleType.AUDITORY)
class AuditoryLearningStyle:
    """Style for learners who prefer listening."""

    description = "Enhances the lesson's audio content"

    def adapt_content(self, lesson: LessonContent) -> None:
        """Audio enhancement is not implemented; the lesson is left unchanged."""
        return None

    def __repr__(self) -> str:
        return "AuditoryLearningStyle()"
