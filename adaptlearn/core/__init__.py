"""
Core types shared across the platform.
"""
from adaptlearn.core.exceptions import (
    DuplicateLessonError,
    DuplicateUserError,
    InvalidLessonError,
    LessonAssetError,
    LessonNotFoundError,
    PlatformError,
    UnknownLearningStyleError,
    UserNotFoundError,
)

__all__ = [
    "PlatformError",
    "LessonNotFoundError",
    "UserNotFoundError",
    "InvalidLessonError",
    "DuplicateLessonError",
    "DuplicateUserError",
    "UnknownLearningStyleError",
    "LessonAssetError",
]
