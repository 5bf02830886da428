"""
Pydantic schemas package
"""

from .arrangement import *

__all__ = [
    "ConstraintOverrides",
    "AutoArrangeRequest",
    "AutoArrangeData",
    "AutoArrangeResponse",
    "ArrangementErrorResponse",
]
