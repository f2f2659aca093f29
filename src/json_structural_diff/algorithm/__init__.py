"""algorithm subpackage: public API for the structural diff algorithm.

Provides the recursive comparison engine, array alignment, the change
recorder, and configuration.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from json_structural_diff.algorithm import ChangeRecorder, DiffEngine

    recorder = ChangeRecorder()
    DiffEngine().run({"a": 1}, {"a": 2}, recorder)
    recorder.result().count.update
    # 1.0
"""

from __future__ import annotations

from json_structural_diff.algorithm.aligner import align_sequences
from json_structural_diff.algorithm.config import DiffConfig
from json_structural_diff.algorithm.engine import DiffEngine
from json_structural_diff.algorithm.lcs import LCSOracle
from json_structural_diff.algorithm.recorder import ChangeRecorder, Side

__all__ = [
    "ChangeRecorder",
    "DiffConfig",
    "DiffEngine",
    "LCSOracle",
    "Side",
    "align_sequences",
]
