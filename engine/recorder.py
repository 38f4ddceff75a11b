"""
recorder.py — Run Recorder & Export
===================================
Runs one algorithm to completion through a Stepper, times it, and renders
the trace for the export feature.

Usage:
    rec = Recorder()
    rec.start("dp", "lcs", "ABCDGH", "AEDFHR")
    metrics = rec.run_to_completion()
    rec.export()        # JSON-friendly dict
    rec.export_text()   # numbered plain-text walkthrough
"""

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from algorithms import FAMILIES, AlgoInfo
from algorithms.step import result_to_dict
from engine.stepper import Stepper


logger = logging.getLogger(__name__)


@dataclass
class RunMetrics:
    algo_key:          str   = ""
    algo_name:         str   = ""
    family:            str   = ""
    total_steps:       int   = 0
    wall_time_ms:      float = 0.0
    final_description: str   = ""
    result:            Any   = None     # DP result, found index, or None


class Recorder:
    """
    Attributes:
        steps   : Full list of steps from the run.
        metrics : RunMetrics, available after run_to_completion().
        stepper : The underlying Stepper.
    """

    def __init__(self):
        self.steps:   List[Any]            = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._algo_info: Optional[AlgoInfo] = None
        self._family:    str                = ""

    def start(self, family: str, algo_key: str, *args) -> None:
        """Create the generator for `algo_key` in `family` and attach it to a fresh Stepper."""
        registry = FAMILIES.get(family)
        if registry is None:
            raise ValueError(f"Unknown algorithm family: {family}")
        info = registry.get(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._family    = family
        self.steps      = []
        self.metrics    = None

        self.stepper = Stepper()
        self.stepper.start(info.fn(*args))

    def run_to_completion(self) -> RunMetrics:
        if self.stepper is None or self._algo_info is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.stepper.jump_to_end()
        self.steps = list(self.stepper.steps)
        wall_ms = (time.monotonic() - started) * 1000

        last = self.steps[-1] if self.steps else None
        self.metrics = RunMetrics(
            algo_key=self._algo_info.key,
            algo_name=self._algo_info.name,
            family=self._family,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            final_description=last.description if last else "",
            result=getattr(last, "result", None),
        )
        logger.info(
            "recorded %s/%s: %d steps in %.2f ms",
            self._family, self._algo_info.key, len(self.steps), wall_ms,
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        metrics: Dict[str, Any] = {}
        if self.metrics is not None:
            metrics = asdict(self.metrics)
            metrics["result"] = result_to_dict(self.metrics.result)
        return {
            "family":   self._family,
            "algo_key": self._algo_info.key if self._algo_info else "",
            "metrics":  metrics,
            "steps":    [s.to_dict() for s in self.steps],
        }

    def export_text(self) -> str:
        """One numbered line per step description, then the result if any."""
        if self.metrics is None:
            raise RuntimeError("Call run_to_completion() first.")

        lines = [f"{self.metrics.algo_name} ({self.metrics.total_steps} steps)", ""]
        for i, step in enumerate(self.steps, start=1):
            lines.append(f"{i}. {step.description}")
            if step.comparison:
                lines.append(f"   {step.comparison}")

        result = self.metrics.result
        if result is not None:
            lines.append("")
            lines.append(f"Result: {_format_result(result)}")
        return "\n".join(lines) + "\n"


def _format_result(result: Any) -> str:
    data = result_to_dict(result)
    if isinstance(data, dict):
        return ", ".join(f"{k}={v}" for k, v in data.items())
    return str(data)
