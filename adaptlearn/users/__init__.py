"""
Learners.
"""
from adaptlearn.users.models import User

__all__ = ["User"]
