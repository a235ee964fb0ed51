# animators.py

from datetime import timedelta
from typing import Optional, Union

from .logger import Logger
from .engine import (
    AnimatorConfig, DotEngine, EngineState, Sink,
    DEFAULT_INTERVAL, DEFAULT_MAX_DOTS,
)

Interval = Union[float, timedelta]


class _AnimatorBase:
    """Validates arguments and launches a DotEngine on construction."""

    def __init__(self, sink: Sink, base_text: str, interval: Optional[Interval] = None,
                 max_dots: int = DEFAULT_MAX_DOTS, pad_to_max_length: bool = True,
                 logger: Optional[Logger] = None):
        config = AnimatorConfig(
            base_text=base_text,
            interval=DEFAULT_INTERVAL if interval is None else interval,
            max_dots=max_dots,
            pad_to_max_length=pad_to_max_length,
        )
        self._engine = DotEngine(config, sink, logger or Logger(__name__))
        self._engine.launch()

    @classmethod
    def start(cls, sink: Sink, base_text: str, interval: Optional[Interval] = None,
              max_dots: int = DEFAULT_MAX_DOTS, pad_to_max_length: bool = True,
              logger: Optional[Logger] = None):
        """
        Start a new animator. Must be called from inside a running event loop.

        Args:
            sink: Callable receiving each frame; may return an awaitable
            base_text: Text the dots are appended to
            interval: Delay between frames in seconds (or a timedelta), default 0.5
            max_dots: Number of dots before the cycle wraps, default 3
            pad_to_max_length: Pad frames with spaces to a constant width
            logger: Optional Logger instance

        Raises:
            ValueError: If base_text is blank, max_dots < 1 or interval is negative
        """
        return cls(sink, base_text, interval, max_dots, pad_to_max_length, logger)

    @property
    def config(self) -> AnimatorConfig:
        return self._engine.config

    @property
    def state(self) -> EngineState:
        return self._engine.state

    @property
    def is_running(self) -> bool:
        return self._engine.is_running

    @property
    def deliveries(self) -> int:
        """Number of frames handed to the sink so far."""
        return self._engine.deliveries


class ScopedDotAnimator(_AnimatorBase):
    """
    Dot animator bound to an ``async with`` block.

    Starts on construction; leaving the block stops the loop and waits for
    it to finish. A sink failure is raised from the exit.

        async with ScopedDotAnimator.start(print, "Loading"):
            await do_work()
    """

    async def __aenter__(self) -> "ScopedDotAnimator":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Stop the animation and wait for it. Safe to call more than once."""
        self._engine.request_stop()
        await self._engine.wait()


class DotAnimator(_AnimatorBase):
    """Manually controlled dot animator: call stop(), then wait_for_completion()."""

    def stop(self) -> None:
        """Request the loop to stop without waiting for it."""
        self._engine.request_stop()

    @property
    def stop_requested(self) -> bool:
        return self._engine.stop_requested

    async def wait_for_completion(self) -> None:
        """Wait for the loop to exit after stop(); re-raises a sink failure."""
        await self._engine.wait()
