"""Backoff strategies for transport retries."""

from enum import Enum


class BackoffStrategy(Enum):
    """Backoff calculation strategies."""

    EXPONENTIAL = "exponential"
    LINEAR = "linear"
    FIXED = "fixed"


def calculate_backoff(
    strategy: BackoffStrategy, attempt: int, base_delay: float, max_delay: float
) -> float:
    """Calculate backoff delay based on strategy and attempt number."""
    if strategy == BackoffStrategy.EXPONENTIAL:
        return min(base_delay**attempt, max_delay)
    elif strategy == BackoffStrategy.LINEAR:
        return min(base_delay * attempt, max_delay)
    else:  # FIXED
        return base_delay
