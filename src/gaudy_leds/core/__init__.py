"""Animation engine."""

from .scheduler import PHASE_PERIOD, AnimationScheduler, SchedulerState

__all__ = ["PHASE_PERIOD", "AnimationScheduler", "SchedulerState"]
