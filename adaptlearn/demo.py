"""
Demonstration scenario.

Walks through the platform once: three learners with different styles, two
lessons, one adapted and displayed lesson, a deliberately missing lesson to
show error handling, user comparison and recommendations.
"""

from __future__ import annotations

from loguru import logger

from adaptlearn.config import Settings, get_settings
from adaptlearn.content.loader import load_demo_lessons
from adaptlearn.core.exceptions import PlatformError
from adaptlearn.delivery.presenter import LessonPresenter
from adaptlearn.platform.engine import AdaptiveLearningPlatform
from adaptlearn.styles import LearningStyleType, create_style
from adaptlearn.users.models import User

DEMO_USERS: tuple[tuple[str, LearningStyleType], ...] = (
    ("Alice", LearningStyleType.VISUAL),
    ("Bob", LearningStyleType.AUDITORY),
    ("Charlie", LearningStyleType.KINESTHETIC),
)


def build_demo_platform(
    settings: Settings,
    presenter: LessonPresenter | None = None,
) -> AdaptiveLearningPlatform:
    """Create the platform with the demo users and lessons registered."""
    platform = AdaptiveLearningPlatform(presenter=presenter)

    for name, style_type in DEMO_USERS:
        options = {"kernel_size": settings.blur_kernel_size} if style_type is LearningStyleType.VISUAL else {}
        platform.add_user(User(name, create_style(style_type, **options)))

    for lesson in load_demo_lessons(settings):
        platform.add_lesson(lesson)

    return platform


def _run(platform: AdaptiveLearningPlatform) -> None:
    presenter = platform.presenter
    current_user = platform.users[0]
    current_lesson = platform.lessons[0]

    platform.adapt_content(current_user, current_lesson)
    platform.display_lesson(current_user, current_lesson)
    platform.track_progress(current_user, current_lesson.id)

    # Exception handling: there is no lesson to show
    missing_lesson = None
    try:
        platform.display_lesson(current_user, missing_lesson)
    except PlatformError as e:
        presenter.report_error(f"Error: {e}")

    another_user = platform.users[1]
    presenter.compare_users(current_user, another_user)

    recommendations = platform.recommend_lessons(current_user)
    presenter.display_user_info(current_user, recommendations)


def run_demo(
    settings: Settings | None = None,
    presenter: LessonPresenter | None = None,
) -> int:
    """
    Run the demonstration.

    Returns:
        Process exit code: 0 on success, 1 if anything escaped the scenario
    """
    settings = settings or get_settings()
    presenter = presenter or LessonPresenter(settings=settings)

    try:
        platform = build_demo_platform(settings, presenter)
        _run(platform)
    except Exception as e:
        logger.exception("Demo scenario failed")
        presenter.report_error(f"An error occurred: {e}")
        return 1

    return 0
