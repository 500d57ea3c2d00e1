from typing import Callable
import time


class Pacer:
    """Fixed pause before a network-facing action.

    Every `wait()` sleeps the full delay, however long the caller spent
    before getting there.
    """

    def __init__(self, delay: float = 3.0, sleep: Callable[[float], None] = time.sleep):
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.delay = delay
        self._sleep = sleep

    def wait(self) -> float:
        if self.delay > 0:
            self._sleep(self.delay)
        return self.delay
