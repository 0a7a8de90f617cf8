"""
Visual learning style.

Smooths the lesson image with Pillow's Gaussian blur. Applying it again blurs
further.
"""

import numpy as np
from loguru import logger
from PIL import Image, ImageFilter

from adaptlearn.content.models import LessonContent
from . import LearningStyleType, register


def sigma_for_kernel(kernel_size: int) -> float:
    """Gaussian standard deviation matching a square kernel of the given size."""
    return 0.3 * ((kernel_size - 1) * 0.5 - 1) + 0.8


def gaussian_blur(image: np.ndarray, kernel_size: int = 5) -> np.ndarray:
    """
    Blur a 2-D (grey) or HxWxC pixel buffer channel by channel.

    Pixels are processed as 8-bit values; the result keeps the input's
    shape and dtype. Empty buffers come back as a copy.
    """
    if image.size == 0:
        return image.copy()

    pixels = image if image.dtype == np.uint8 else np.clip(np.rint(image), 0, 255).astype(np.uint8)
    planes = pixels[:, :, np.newaxis] if pixels.ndim == 2 else pixels
    blur = ImageFilter.GaussianBlur(radius=sigma_for_kernel(kernel_size))

    blurred = np.stack(
        [
            np.asarray(Image.fromarray(np.ascontiguousarray(planes[:, :, c])).filter(blur))
            for c in range(planes.shape[2])
        ],
        axis=-1,
    )
    if image.ndim == 2:
        blurred = blurred[:, :, 0]
    return blurred.astype(image.dtype)


@register(LearningStyleType.VISUAL)
class VisualLearningStyle:
    """Style for learners who prefer diagrams and images."""

    description = "Smooths the lesson image for easier viewing"

    def __init__(self, kernel_size: int = 5):
        self.kernel_size = kernel_size

    def adapt_content(self, lesson: LessonContent) -> None:
        """Blur the lesson's visual payload."""
        if not lesson.has_visual:
            logger.debug(f"Lesson {lesson.id} has no image, nothing to blur")
            return
        lesson.visual = gaussian_blur(lesson.visual, kernel_size=self.kernel_size)
        logger.debug(f"Blurred lesson {lesson.id} with a {self.kernel_size}x{self.kernel_size} kernel")

    def __repr__(self) -> str:
        return f"VisualLearningStyle(kernel_size={self.kernel_size})"
