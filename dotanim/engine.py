# engine.py

import asyncio
import inspect
from datetime import timedelta
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Union

from .logger import Logger

Sink = Callable[[str], Union[None, Awaitable[Any]]]

DEFAULT_INTERVAL = 0.5
DEFAULT_MAX_DOTS = 3


def format_dots(base_text: str, dot_count: int, max_dots: int,
                pad_to_max_length: bool = True) -> str:
    """Return base_text followed by dot_count dots, space-padded to max_dots if requested."""
    dots = '.' * dot_count
    if pad_to_max_length:
        dots = dots.ljust(max_dots)
    return base_text + dots


@dataclass(frozen=True)
class AnimatorConfig:
    """
    Immutable animator settings.

    Validates on construction so an invalid config never exists.
    The interval is stored in seconds; a timedelta is accepted and converted.
    """
    base_text: str
    interval: float = DEFAULT_INTERVAL
    max_dots: int = DEFAULT_MAX_DOTS
    pad_to_max_length: bool = True

    def __post_init__(self):
        if not isinstance(self.base_text, str) or not self.base_text.strip():
            raise ValueError("base_text cannot be empty or whitespace")
        if isinstance(self.max_dots, bool) or not isinstance(self.max_dots, int) or self.max_dots < 1:
            raise ValueError(f"max_dots must be an integer of at least 1, got {self.max_dots!r}")
        interval = self.interval
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        # `not >= 0` also rejects NaN
        if isinstance(interval, bool) or not isinstance(interval, (int, float)) or not interval >= 0:
            raise ValueError(f"interval must be a non-negative duration, got {self.interval!r}")
        # frozen dataclass: bypass __setattr__ to normalise
        object.__setattr__(self, 'interval', float(interval))

    @property
    def frame_width(self) -> int:
        """Length of every frame when padding is enabled."""
        return len(self.base_text) + self.max_dots

    def format(self, dot_count: int) -> str:
        return format_dots(self.base_text, dot_count, self.max_dots, self.pad_to_max_length)


class DotCycle:
    """Dot counter cycling 0..max_dots."""

    def __init__(self, max_dots: int):
        self.max_dots = max_dots
        self.dot_count = 0

    def advance(self) -> int:
        self.dot_count = (self.dot_count + 1) % (self.max_dots + 1)
        return self.dot_count


class EngineState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class DotEngine:
    """
    Background loop shared by both animator variants.

    Each tick formats the current frame, hands it to the sink (awaiting it
    when the sink returns an awaitable), advances the cycle and sleeps for
    the configured interval. The sleep wakes early once a stop is requested.

    A sink exception is logged and ends the task; it is re-raised from wait().
    """

    def __init__(self, config: AnimatorConfig, sink: Sink, logger: Optional[Logger] = None):
        if not callable(sink):
            raise ValueError("sink must be callable")
        self.config = config
        self.sink = sink
        self.logger = logger or Logger(__name__)
        self.cycle = DotCycle(config.max_dots)
        self.deliveries = 0
        self._stop_event = asyncio.Event()
        self._task: Optional[asyncio.Task] = None

    def launch(self) -> asyncio.Task:
        """Schedule the loop on the running event loop. Only one launch per engine."""
        if self._task is not None:
            raise RuntimeError("animation loop already launched")
        self._task = asyncio.get_running_loop().create_task(self._run())
        self.logger.debug(f"Started dot animation for {self.config.base_text!r}")
        return self._task

    @property
    def state(self) -> EngineState:
        if self._task is None or self._task.done():
            return EngineState.STOPPED
        return EngineState.RUNNING

    @property
    def is_running(self) -> bool:
        return self.state is EngineState.RUNNING

    @property
    def stop_requested(self) -> bool:
        return self._stop_event.is_set()

    async def _run(self) -> None:
        try:
            while not self._stop_event.is_set():
                text = self.config.format(self.cycle.dot_count)
                result = self.sink(text)
                if inspect.isawaitable(result):
                    await result
                self.deliveries += 1

                self.cycle.advance()
                await self._sleep()
        except Exception as e:
            self.logger.error(f"Sink failed for {self.config.base_text!r}: {e}", exc_info=True)
            raise
        self.logger.debug(f"Dot animation for {self.config.base_text!r} stopped "
                          f"after {self.deliveries} updates")

    async def _sleep(self) -> None:
        """Wait out the interval unless a stop is requested first."""
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=self.config.interval)
        except asyncio.TimeoutError:
            pass

    def request_stop(self) -> None:
        if not self._stop_event.is_set():
            self.logger.debug(f"Stop requested for {self.config.base_text!r}")
        self._stop_event.set()

    async def wait(self) -> None:
        """Wait for the loop to finish; cancellation of the loop itself counts as normal exit."""
        if self._task is None:
            return
        try:
            # shield so cancelling the waiter leaves the loop alone
            await asyncio.shield(self._task)
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            if not self._task.cancelled():
                raise
