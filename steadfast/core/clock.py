"""
Clock - Interruptible waiting primitives.

Every wait in the engine goes through a ``Clock`` so tests can swap in
a virtual one instead of sleeping for real.
"""

import logging
import time
from typing import Callable, Optional, Tuple, Type, TypeVar

from steadfast.core.errors import WaitTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_POLL_INTERVAL = 0.5


class Clock:
    """Wall clock backed by ``time``. Sleeping is interruptible by signals."""

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


def poll_until(
    condition: Callable[[], T],
    timeout: float,
    clock: Optional[Clock] = None,
    interval: float = DEFAULT_POLL_INTERVAL,
    ignored_exceptions: Tuple[Type[BaseException], ...] = (),
    description: str = "condition",
    element_name: Optional[str] = None,
    locator: Optional[Tuple[str, str]] = None,
) -> T:
    """
    Evaluate ``condition`` until it returns a truthy value.

    The condition is always evaluated at least once. Exceptions listed in
    ``ignored_exceptions`` count as "not yet"; anything else propagates.

    Returns:
        The first truthy value returned by ``condition``

    Raises:
        WaitTimeoutError: if ``timeout`` seconds elapse first
    """
    clock = clock or Clock()
    deadline = clock.monotonic() + timeout
    last_error: Optional[BaseException] = None

    while True:
        try:
            value = condition()
            if value:
                return value
        except ignored_exceptions as e:
            last_error = e
            logger.debug(f"[poll_until] {description} not met yet: {e}")

        if clock.monotonic() >= deadline:
            break
        clock.sleep(interval)

    message = f"Timed out after {timeout}s waiting for {description}"
    if locator:
        message += f" (locator: {locator[0]}={locator[1]})"
    error = WaitTimeoutError(message, element_name=element_name, locator=locator, condition=description)
    if last_error is not None:
        raise error from last_error
    raise error
