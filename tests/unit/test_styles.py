"""
Unit tests for learning styles.

Covers the registry and the adapt_content() contract of each style.
"""

import numpy as np
import pytest

from adaptlearn.content.models import LessonContent
from adaptlearn.core.exceptions import UnknownLearningStyleError
from adaptlearn.styles import STYLES, LearningStyleType, create_style, get_style_class
from adaptlearn.styles.auditory import AuditoryLearningStyle
from adaptlearn.styles.kinesthetic import KinestheticLearningStyle
from adaptlearn.styles.visual import VisualLearningStyle, gaussian_blur, sigma_for_kernel


class TestStyleRegistry:
    """Test the style registry."""

    def test_all_styles_registered(self):
        assert set(STYLES) == set(LearningStyleType)

    def test_get_style_class_by_string(self):
        assert get_style_class("Visual") is VisualLearningStyle

    def test_get_style_class_by_enum(self):
        assert get_style_class(LearningStyleType.AUDITORY) is AuditoryLearningStyle

    def test_get_style_class_invalid(self):
        assert get_style_class("reading") is None

    def test_create_style_returns_fresh_instances(self):
        first = create_style("kinesthetic")
        second = create_style("kinesthetic")

        assert isinstance(first, KinestheticLearningStyle)
        assert first is not second

    def test_create_style_unknown_raises(self):
        with pytest.raises(UnknownLearningStyleError):
            create_style("telepathic")

    def test_registered_classes_know_their_kind(self):
        assert VisualLearningStyle.kind is LearningStyleType.VISUAL
        assert create_style("auditory").kind == "auditory"


class TestVisualStyle:
    def test_adapt_blurs_image(self, sample_lesson):
        before = sample_lesson.visual.copy()

        VisualLearningStyle().adapt_content(sample_lesson)

        assert sample_lesson.visual.shape == before.shape
        assert not np.array_equal(sample_lesson.visual, before)

    def test_adapt_is_not_idempotent(self, sample_lesson):
        style = VisualLearningStyle()
        style.adapt_content(sample_lesson)
        once = sample_lesson.visual.copy()

        style.adapt_content(sample_lesson)

        assert not np.array_equal(sample_lesson.visual, once)

    def test_adapt_leaves_text_and_audio(self, sample_lesson):
        VisualLearningStyle().adapt_content(sample_lesson)

        assert sample_lesson.text == "Fractions represent parts of a whole..."
        assert sample_lesson.audio == "Audio explanation of fractions"

    def test_lesson_without_image_untouched(self):
        lesson = LessonContent(3, "Geometry", None, "text", "audio")

        VisualLearningStyle().adapt_content(lesson)

        assert lesson.visual.shape == (0, 0, 3)

    def test_kernel_size_option(self):
        style = create_style("visual", kernel_size=3)

        assert style.kernel_size == 3


@pytest.mark.parametrize("style_cls", [AuditoryLearningStyle, KinestheticLearningStyle])
class TestStubStyles:
    def test_adapt_leaves_lesson_unchanged(self, style_cls, sample_lesson):
        visual_before = sample_lesson.visual
        pixels_before = sample_lesson.visual.copy()

        style_cls().adapt_content(sample_lesson)

        assert sample_lesson.visual is visual_before
        assert np.array_equal(sample_lesson.visual, pixels_before)
        assert sample_lesson.text == "Fractions represent parts of a whole..."
        assert sample_lesson.audio == "Audio explanation of fractions"


class TestGaussianBlur:
    """Test the Pillow-backed blur used by the visual style."""

    def test_sigma_for_default_kernel(self):
        assert sigma_for_kernel(5) == pytest.approx(1.1)

    def test_preserves_shape_and_dtype(self, sample_image):
        blurred = gaussian_blur(sample_image)

        assert blurred.shape == sample_image.shape
        assert blurred.dtype == np.uint8

    def test_does_not_modify_input(self, sample_image):
        before = sample_image.copy()
        gaussian_blur(sample_image)

        assert np.array_equal(sample_image, before)

    def test_blurring_twice_smooths_further(self, sample_image):
        once = gaussian_blur(sample_image)
        twice = gaussian_blur(once)

        assert not np.array_equal(once, twice)
        assert twice.astype(float).std() < sample_image.astype(float).std()

    def test_grey_image(self, sample_image):
        grey = sample_image[:, :, 0]

        blurred = gaussian_blur(grey)

        assert blurred.shape == grey.shape
        assert not np.array_equal(blurred, grey)

    def test_grey_alpha_image(self, sample_image):
        grey_alpha = np.ascontiguousarray(sample_image[:, :, :2])

        assert gaussian_blur(grey_alpha).shape == grey_alpha.shape

    def test_float_image_keeps_dtype(self, sample_image):
        blurred = gaussian_blur(sample_image.astype(np.float32))

        assert blurred.dtype == np.float32

    def test_empty_image_returned_as_copy(self):
        image = np.zeros((0, 0, 3), dtype=np.uint8)
        blurred = gaussian_blur(image)

        assert blurred.shape == (0, 0, 3)
        assert blurred is not image


def test_every_style_describes_itself():
    for style_cls in STYLES.values():
        assert style_cls.description
