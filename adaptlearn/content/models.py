"""
Lesson content record.
"""

from __future__ import annotations

import numpy as np


def empty_visual() -> np.ndarray:
    """Pixel buffer used when a lesson has no readable image."""
    return np.zeros((0, 0, 3), dtype=np.uint8)


class LessonContent:
    """
    A lesson: id, topic and three payloads (image, text, audio).

    Identity fields are read-only. The visual payload is a numpy pixel buffer
    that learning styles may transform or replace.
    """

    def __init__(
        self,
        lesson_id: int,
        topic: str,
        visual: np.ndarray | None,
        text: str,
        audio: str,
    ):
        self._id = lesson_id
        self._topic = topic
        self.visual = empty_visual() if visual is None else visual
        self._text = text
        self._audio = audio

    @property
    def id(self) -> int:
        return self._id

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def text(self) -> str:
        return self._text

    @property
    def audio(self) -> str:
        return self._audio

    @property
    def has_visual(self) -> bool:
        return self.visual.size > 0

    def __repr__(self) -> str:
        return f"LessonContent(id={self._id}, topic={self._topic!r}, visual_shape={self.visual.shape})"
