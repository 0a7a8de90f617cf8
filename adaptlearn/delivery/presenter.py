"""
Console presentation for lessons and learners.

The terminal doubles as the display surface for lesson images: the pixel
buffer is drawn as a half-block thumbnail (two image rows per text row) and
the presenter waits for Enter before moving on.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from adaptlearn.config import Settings, get_settings
from adaptlearn.content.models import LessonContent
from adaptlearn.users.models import User

HALF_BLOCK = "▀"


def _to_rgb8(image: np.ndarray) -> np.ndarray:
    """Coerce a grey/grey-alpha/RGB/RGBA buffer of any numeric dtype to HxWx3 uint8."""
    if image.ndim == 2:
        image = np.stack([image] * 3, axis=-1)
    elif image.shape[2] < 3:
        # grey, or grey + alpha: keep the grey channel
        image = np.repeat(image[:, :, :1], 3, axis=2)
    else:
        image = image[:, :, :3]

    if np.issubdtype(image.dtype, np.floating) and image.max(initial=0) <= 1.0:
        image = image * 255
    return np.clip(image, 0, 255).astype(np.uint8)


def render_thumbnail(image: np.ndarray, width: int) -> Text:
    """
    Render an image as colored half-block characters.

    Args:
        image: Non-empty 2-D or 3-D pixel buffer
        width: Maximum thumbnail width in characters

    Returns:
        rich Text, one line per pair of sampled image rows
    """
    rgb = _to_rgb8(image)
    height_px, width_px = rgb.shape[:2]
    cols = max(1, min(width, width_px))
    rows = max(2, round(height_px * cols / width_px))
    rows += rows % 2

    ys = (np.arange(rows) * height_px / rows).astype(int)
    xs = (np.arange(cols) * width_px / cols).astype(int)
    sampled = rgb[ys][:, xs]

    text = Text()
    for y in range(0, rows, 2):
        for x in range(cols):
            top = sampled[y, x]
            bottom = sampled[y + 1, x]
            text.append(
                HALF_BLOCK,
                style=f"rgb({top[0]},{top[1]},{top[2]}) on rgb({bottom[0]},{bottom[1]},{bottom[2]})",
            )
        if y + 2 < rows:
            text.append("\n")
    return text


class LessonPresenter:
    """Writes lessons, learners and errors to the terminal."""

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    # ------------------------------------------------------------------
    # Lessons
    # ------------------------------------------------------------------

    def show_lesson_header(self, user: User, lesson: LessonContent) -> None:
        self.console.print(f"Displaying lesson for {user.name}")
        self.console.print(f"Topic: {lesson.topic}")

    def show_visual(self, lesson: LessonContent) -> None:
        """Draw the lesson image and block until acknowledged."""
        if lesson.has_visual:
            body = render_thumbnail(lesson.visual, self.settings.thumbnail_width)
        else:
            body = Text("no visual content", style="dim")

        self.console.print(
            Panel(
                body,
                title="[bold cyan]Visual Content[/bold cyan]",
                border_style="cyan",
                box=box.ROUNDED,
                expand=False,
            )
        )
        if self.settings.wait_for_key:
            self._wait_for_acknowledgement()

    def _wait_for_acknowledgement(self) -> None:
        """Block on Enter. A closed stdin counts as acknowledged."""
        try:
            Prompt.ask("Press Enter to continue", console=self.console, default="", show_default=False)
        except EOFError:
            self.console.print()
            logger.debug("stdin closed, continuing without acknowledgement")

    def show_lesson_body(self, lesson: LessonContent) -> None:
        self.console.print(f"Text Content: {lesson.text}")
        self.console.print(f"Audio Content: {lesson.audio}")

    def show_lesson(self, user: User, lesson: LessonContent) -> None:
        self.show_lesson_header(user, lesson)
        self.show_visual(lesson)
        self.show_lesson_body(lesson)

    # ------------------------------------------------------------------
    # Learners
    # ------------------------------------------------------------------

    def display_user_info(
        self,
        user: User,
        recommendations: Sequence[LessonContent] | None = None,
    ) -> None:
        """Print the user's name, and their recommended lessons when given."""
        self.console.print(f"User: {user.name}")
        if recommendations is None:
            return
        self.console.print("Recommended lessons:")
        for lesson in recommendations:
            self.console.print(f"- {lesson.topic}")

    def compare_users(self, first: User, second: User) -> bool:
        same = first == second
        self.console.print("Users are the same." if same else "Users are different.")
        return same

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def report_error(self, message: str) -> None:
        self.err_console.print(message, style="red", markup=False, highlight=False)
