"""JsonDiffComparator: orchestrator that wires DiffConfig + DiffEngine + ChangeRecorder.

This is the central wiring layer between the raw algorithm and the public
API.  It applies configuration-driven preprocessing, runs the engine against
a fresh ``ChangeRecorder`` and returns the frozen ``DiffResult``.

Architecture:
- compare() starts a wall-clock timer, preprocesses inputs, runs the engine,
  snapshots the recorder and logs a DEBUG summary with the elapsed time.
- null_equals_missing=True is implemented as a preprocessing step that strips
  None-valued keys from dicts before the comparison.
- A new ChangeRecorder is created for every compare() call, so a comparator
  instance carries no state between calls.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.algorithm.engine import DiffEngine
from json_structural_diff.algorithm.recorder import ChangeRecorder
from json_structural_diff.result import DiffResult

__all__ = ["JsonDiffComparator"]

logger = logging.getLogger(__name__)


class JsonDiffComparator:
    """Orchestrator for structural JSON comparison.

    Example::

        from json_structural_diff.comparator import JsonDiffComparator

        cmp = JsonDiffComparator()
        result = cmp.compare({"Hello": " World"}, {"a": "b"})
        print(result.diff_left)    # {"/Hello": "delete", "": "child-update"}
        print(result.diff_right)   # {"/a": "create", "": "child-update"}
        print(result.count)        # DiffCount(create=1.0, update=0.0, delete=1.0)
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison options.  Defaults to ``DiffConfig()``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._engine = DiffEngine(oracle=self._config.oracle)

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any) -> DiffResult:
        """Compare two JSON values and return their DiffResult.

        Args:
            left:  First JSON value (dict, list, str, int, float, bool, None).
            right: Second JSON value.

        Returns:
            A ``DiffResult`` with both diff maps and the change count.

        Raises:
            TypeError: If either value contains a non-JSON value.
        """
        t0 = time.perf_counter()

        left = self._preprocess(left)
        right = self._preprocess(right)

        recorder = ChangeRecorder()
        self._engine.run(left, right, recorder)
        result = recorder.result()

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "compared documents: create=%s update=%s delete=%s "
            "(%d left paths, %d right paths) in %.3f ms",
            result.count.create,
            result.count.update,
            result.count.delete,
            len(result.diff_left),
            len(result.diff_right),
            elapsed_ms,
        )
        return result

    # ------------------------------------------------------------------
    # Preprocessing
    # ------------------------------------------------------------------

    def _preprocess(self, value: Any) -> Any:
        """Strip None-valued keys when null_equals_missing=True.

        When ``self._config.null_equals_missing`` is False, the value is
        returned unchanged.  When True, recursively removes any dict entry
        whose value is None, so that ``{"x": None}`` becomes ``{}`` and
        therefore compares as identical to ``{}``.

        Args:
            value: Any valid JSON value.

        Returns:
            The preprocessed value (a new object; the input is never mutated).
        """
        if not self._config.null_equals_missing:
            return value

        if isinstance(value, dict):
            return {k: self._preprocess(v) for k, v in value.items() if v is not None}
        if isinstance(value, (list, tuple)):
            return [self._preprocess(item) for item in value]
        return value
