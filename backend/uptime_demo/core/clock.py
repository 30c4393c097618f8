"""
Clock abstraction for cooperative delays

The emitter never calls asyncio.sleep directly; it suspends through a Clock so
tests can substitute simulated time.
"""
import asyncio
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of time and cooperative suspension"""

    @abstractmethod
    def monotonic(self) -> float:
        """Current time in seconds"""

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        """Suspend the calling task for `seconds`"""

    async def sleep_ms(self, milliseconds: int) -> None:
        await self.sleep(milliseconds / 1000)


class AsyncioClock(Clock):
    """Clock backed by the running event loop"""

    def monotonic(self) -> float:
        return asyncio.get_running_loop().time()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


_default_clock = AsyncioClock()


def get_clock() -> Clock:
    """Get the process-wide default clock"""
    return _default_clock
