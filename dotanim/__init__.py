# __init__.py

from .logger import Logger
from .engine import AnimatorConfig, DotCycle, DotEngine, EngineState, format_dots
from .animators import ScopedDotAnimator, DotAnimator
from .terminal import TerminalSink

__all__ = [
    "ScopedDotAnimator",
    "DotAnimator",
    "AnimatorConfig",
    "DotCycle",
    "DotEngine",
    "EngineState",
    "format_dots",
    "TerminalSink",
    "Logger",
]
