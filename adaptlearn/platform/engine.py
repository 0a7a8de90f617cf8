"""
Adaptive Learning Platform.

Owns the registered users and lessons and wires them together:
- adapt_content: run a user's learning style over a lesson
- display_lesson: present a lesson to a user
- track_progress: record a completed lesson
- recommend_lessons: lessons the user has not completed yet

Registration policy: lesson ids and user names are unique per platform;
a second registration raises instead of shadowing the first.
"""

from __future__ import annotations

from loguru import logger

from adaptlearn.content.models import LessonContent
from adaptlearn.core.exceptions import (
    DuplicateLessonError,
    DuplicateUserError,
    InvalidLessonError,
    LessonNotFoundError,
    UserNotFoundError,
)
from adaptlearn.delivery.presenter import LessonPresenter
from adaptlearn.users.models import User


class AdaptiveLearningPlatform:
    """Registry and orchestrator for users and lessons."""

    def __init__(self, presenter: LessonPresenter | None = None):
        self._users: list[User] = []
        self._lessons: list[LessonContent] = []
        self._lessons_by_id: dict[int, LessonContent] = {}
        self._presenter = presenter

    @property
    def presenter(self) -> LessonPresenter:
        """Lazy load the presenter so headless use never touches the terminal."""
        if self._presenter is None:
            self._presenter = LessonPresenter()
        return self._presenter

    # ========================================
    # Registration
    # ========================================

    def add_user(self, user: User) -> None:
        if user in self._users:
            raise DuplicateUserError(user.name)
        self._users.append(user)
        logger.debug(f"Registered user {user!r}")

    def add_lesson(self, lesson: LessonContent) -> None:
        if lesson.id in self._lessons_by_id:
            raise DuplicateLessonError(lesson.id)
        self._lessons.append(lesson)
        self._lessons_by_id[lesson.id] = lesson
        logger.debug(f"Registered lesson {lesson!r}")

    @property
    def users(self) -> tuple[User, ...]:
        return tuple(self._users)

    @property
    def lessons(self) -> tuple[LessonContent, ...]:
        return tuple(self._lessons)

    def get_user(self, name: str) -> User:
        for user in self._users:
            if user.name == name:
                return user
        raise UserNotFoundError(name)

    def get_lesson(self, lesson_id: int) -> LessonContent:
        try:
            return self._lessons_by_id[lesson_id]
        except KeyError:
            raise LessonNotFoundError(lesson_id) from None

    def has_lesson(self, lesson_id: int) -> bool:
        return lesson_id in self._lessons_by_id

    def _resolve_lesson(self, lesson: LessonContent | int | None) -> LessonContent:
        if isinstance(lesson, LessonContent):
            return lesson
        if isinstance(lesson, int) and not isinstance(lesson, bool):
            return self.get_lesson(lesson)
        raise InvalidLessonError()

    # ========================================
    # Learning Operations
    # ========================================

    def adapt_content(self, user: User, lesson: LessonContent | int | None) -> LessonContent:
        """
        Apply the user's learning style to a lesson.

        Args:
            user: Learner whose style is applied
            lesson: Lesson object or the id of a registered lesson

        Returns:
            The (possibly modified) lesson

        Raises:
            InvalidLessonError: lesson is missing
            LessonNotFoundError: lesson id is not registered
        """
        target = self._resolve_lesson(lesson)
        style = user.learning_style
        logger.debug(f"Adapting lesson {target.id} for {user.name} ({style.kind}: {style.description})")
        style.adapt_content(target)
        return target

    def display_lesson(self, user: User, lesson: LessonContent | int | None) -> None:
        """
        Present a lesson to a user. Blocks while the image is on screen.

        Raises:
            InvalidLessonError: lesson is missing or not a lesson
            LessonNotFoundError: lesson id is not registered
        """
        self.presenter.show_lesson(user, self._resolve_lesson(lesson))

    def track_progress(self, user: User, lesson_id: int) -> None:
        """
        Record that the user completed a registered lesson.

        Raises:
            LessonNotFoundError: lesson_id is not registered
        """
        if not self.has_lesson(lesson_id):
            raise LessonNotFoundError(lesson_id)
        if user.has_completed(lesson_id):
            logger.debug(f"{user.name} completed lesson {lesson_id} again")
        user.complete_lesson(lesson_id)

    def recommend_lessons(self, user: User) -> list[LessonContent]:
        """Lessons the user has not completed, in registration order."""
        completed = set(user.completed_lessons)
        return [lesson for lesson in self._lessons if lesson.id not in completed]
