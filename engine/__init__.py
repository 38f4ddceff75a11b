"""
engine/
-------
Composition, playback and recording layer.

    from engine import Runner, ResultCache, Stepper, Recorder
"""

from engine.cache    import ResultCache, cache_key
from engine.runner   import Runner
from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "ResultCache",
    "cache_key",
    "Runner",
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
]
