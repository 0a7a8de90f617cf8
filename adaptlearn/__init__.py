"""
Adaptive learning platform.

A small learning platform built around three ideas:
- Learning styles adapt lesson content (visual, auditory, kinesthetic)
- The platform tracks which lessons each learner has completed
- Recommendations are the lessons a learner has not finished yet
"""

__version__ = "1.0.0"
