"""
Ordered fallback chains.

A resolver is a list of independent strategies, each taking the same
inputs and returning a value or None. ``run_cascade`` tries them in
order and returns the first value produced.
"""

from typing import Any, Callable, Optional, Sequence, Tuple

from src.utils.logger import get_logger

logger = get_logger(__name__)

Strategy = Callable[..., Optional[Any]]


def run_cascade(
    field_name: str,
    strategies: Sequence[Strategy],
    *args: Any
) -> Tuple[Optional[Any], Optional[str]]:
    """
    Run strategies in order until one returns a value.

    Args:
        field_name: Field being resolved, for logging.
        strategies: Callables tried in order.
        *args: Arguments passed to every strategy.

    Returns:
        Tuple of (value, strategy name); (None, None) if all fail.
    """
    for strategy in strategies:
        value = strategy(*args)
        if value is not None:
            name = getattr(strategy, '__name__', repr(strategy)).lstrip('_')
            logger.debug(f"{field_name} resolved by {name}: {value!r}")
            return value, name

    logger.debug(f"{field_name} not found by any strategy")
    return None, None
