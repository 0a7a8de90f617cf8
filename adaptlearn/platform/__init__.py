"""
Platform orchestration.
"""
from adaptlearn.platform.engine import AdaptiveLearningPlatform

__all__ = ["AdaptiveLearningPlatform"]
