"""
Lesson content: the record type and its loaders.
"""
from adaptlearn.content.models import LessonContent, empty_visual
from adaptlearn.content.loader import DEMO_CATALOG, LessonSpec, load_demo_lessons, load_image

__all__ = [
    "LessonContent",
    "LessonSpec",
    "DEMO_CATALOG",
    "empty_visual",
    "load_image",
    "load_demo_lessons",
]
