"""
Exception types raised by the learning platform.

Everything derives from PlatformError, itself a RuntimeError, so callers that
only care about "the platform refused this" can catch a single type.
"""

from __future__ import annotations


class PlatformError(RuntimeError):
    """Base class for platform failures."""
    pass


class LessonNotFoundError(PlatformError):
    """Raised when a lesson id is not owned by the platform."""

    def __init__(self, lesson_id: int, message: str | None = None):
        self.lesson_id = lesson_id
        super().__init__(message or f"Lesson {lesson_id} not found")


class UserNotFoundError(PlatformError):
    """Raised when no registered user has the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"User '{name}' not found")


class InvalidLessonError(PlatformError):
    """Raised when an operation receives a missing or malformed lesson."""

    def __init__(self, message: str = "Invalid lesson"):
        super().__init__(message)


class DuplicateLessonError(PlatformError):
    """Raised when a lesson id is registered twice."""

    def __init__(self, lesson_id: int):
        self.lesson_id = lesson_id
        super().__init__(f"Lesson {lesson_id} is already registered")


class DuplicateUserError(PlatformError):
    """Raised when a user name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"User '{name}' is already registered")


class UnknownLearningStyleError(PlatformError, ValueError):
    """Raised when a learning style name has no registered implementation."""

    def __init__(self, style: str):
        self.style = style
        super().__init__(f"Unknown learning style: {style!r}")


class LessonAssetError(PlatformError):
    """Raised when a lesson image cannot be read and assets are strict."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot read lesson image {path}: {reason}")
