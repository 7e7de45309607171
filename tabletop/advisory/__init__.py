"""
Advisory - Client for the remote best-move service (shut the box).
"""

from .client import AdvisoryClient, AdviceUnavailable
from .schemas import BestActionRequest, BestActionResponse

__all__ = [
    "AdvisoryClient",
    "AdviceUnavailable",
    "BestActionRequest",
    "BestActionResponse",
]
