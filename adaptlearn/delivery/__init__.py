"""
Terminal delivery of lessons.
"""
from adaptlearn.delivery.presenter import LessonPresenter, render_thumbnail

__all__ = ["LessonPresenter", "render_thumbnail"]
