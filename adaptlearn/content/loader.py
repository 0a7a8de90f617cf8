"""
Lesson loading.

Decodes lesson images with Pillow into numpy RGB buffers and builds the
fixed lesson catalog used by the demonstration.

An unreadable image is a warning by default: the lesson gets an empty buffer
and the platform carries on. With ``strict_assets`` enabled it raises
LessonAssetError instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from loguru import logger
from PIL import Image

from adaptlearn.config import Settings
from adaptlearn.content.models import LessonContent, empty_visual
from adaptlearn.core.exceptions import LessonAssetError


@dataclass(frozen=True)
class LessonSpec:
    """Static description of a catalog lesson."""

    lesson_id: int
    topic: str
    image_setting: str  # name of the Settings field holding the file name
    text: str
    audio: str


DEMO_CATALOG: tuple[LessonSpec, ...] = (
    LessonSpec(
        lesson_id=1,
        topic="Introduction to Fractions",
        image_setting="fraction_image",
        text="Fractions represent parts of a whole...",
        audio="Audio explanation of fractions",
    ),
    LessonSpec(
        lesson_id=2,
        topic="Basic Algebra",
        image_setting="algebra_image",
        text="Algebra is the study of mathematical symbols...",
        audio="Audio explanation of algebra",
    ),
)


def load_image(path: str | Path, strict: bool = False) -> np.ndarray:
    """
    Decode an image file into an HxWx3 uint8 array.

    Args:
        path: Image file location
        strict: Raise LessonAssetError instead of returning an empty buffer

    Returns:
        Writable RGB pixel buffer, or an empty (0, 0, 3) buffer on failure
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            return np.array(img.convert("RGB"))
    except OSError as e:
        if strict:
            raise LessonAssetError(str(path), str(e)) from e
        logger.warning(f"Could not read lesson image {path}: {e}")
        return empty_visual()


def build_lesson(spec: LessonSpec, settings: Settings) -> LessonContent:
    """Create a LessonContent from a catalog entry."""
    image_path = settings.lesson_image_path(getattr(settings, spec.image_setting))
    visual = load_image(image_path, strict=settings.strict_assets)
    return LessonContent(spec.lesson_id, spec.topic, visual, spec.text, spec.audio)


def load_demo_lessons(settings: Settings) -> list[LessonContent]:
    """Load every lesson of the demo catalog, in catalog order."""
    lessons = [build_lesson(spec, settings) for spec in DEMO_CATALOG]
    logger.debug(f"Loaded {len(lessons)} lessons from {settings.assets_dir}")
    return lessons
