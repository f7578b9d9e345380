from agencydash.animation.counter import AnimatedCounter, CounterState
from agencydash.animation.schedulers import (
    AsyncioFrameScheduler,
    BlockingFrameScheduler,
    FrameScheduler,
)

__all__ = [
    "AnimatedCounter",
    "AsyncioFrameScheduler",
    "BlockingFrameScheduler",
    "CounterState",
    "FrameScheduler",
]
