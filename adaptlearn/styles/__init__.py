"""
Learning styles for lesson adaptation.

Each style (visual, auditory, kinesthetic) has its own module with:
- adapt_content(): Transform a lesson for that style
- kind / description: What the style is

Styles are registered as classes; every user gets a fresh instance from
create_style().
"""

from enum import Enum
from typing import TYPE_CHECKING

from adaptlearn.core.exceptions import UnknownLearningStyleError

if TYPE_CHECKING:
    from .base import LearningStyle


class LearningStyleType(str, Enum):
    """Supported learning styles."""
    VISUAL = "visual"
    AUDITORY = "auditory"
    KINESTHETIC = "kinesthetic"


# Style registry - populated by @register decorator
STYLES: dict[LearningStyleType, type] = {}


def register(style_type: LearningStyleType):
    """Decorator to register a learning style class."""
    def decorator(cls):
        cls.kind = style_type
        STYLES[style_type] = cls
        return cls
    return decorator


def _coerce(style_type: "str | LearningStyleType") -> LearningStyleType | None:
    if isinstance(style_type, LearningStyleType):
        return style_type
    try:
        return LearningStyleType(style_type.strip().lower())
    except ValueError:
        return None


def get_style_class(style_type: "str | LearningStyleType") -> type | None:
    """Get the registered class for a style, or None."""
    resolved = _coerce(style_type)
    if resolved is None:
        return None
    return STYLES.get(resolved)


def create_style(style_type: "str | LearningStyleType", **options) -> "LearningStyle":
    """Instantiate a new style object. Options go to the style's constructor."""
    cls = get_style_class(style_type)
    if cls is None:
        raise UnknownLearningStyleError(str(style_type))
    return cls(**options)


# Import styles to trigger registration
from . import visual
from . import auditory
from . import kinesthetic

__all__ = [
    "LearningStyleType",
    "STYLES",
    "create_style",
    "get_style_class",
    "register",
]
