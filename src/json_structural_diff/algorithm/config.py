"""DiffConfig: immutable options for a structural comparison.

The defaults reproduce the plain structural diff: null and missing keys are
distinct, and arrays are aligned with the built-in LCS oracle.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_structural_diff.protocols import CommonSubsequenceOracle


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for a comparison.

    Attributes:
        null_equals_missing: When True, mapping entries whose value is JSON
            null are dropped before comparison, so ``{"x": None}`` compares
            as identical to ``{}``.  Default False.
        oracle: Common-subsequence oracle used to align arrays.  Defaults to
            ``LCSOracle()`` when None.
    """

    null_equals_missing: bool = False
    oracle: CommonSubsequenceOracle | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.null_equals_missing, bool):
            msg = (
                "null_equals_missing must be a bool, "
                f"got {type(self.null_equals_missing).__name__}"
            )
            raise ValueError(msg)
        if self.oracle is not None and not isinstance(
            self.oracle, CommonSubsequenceOracle
        ):
            msg = (
                "oracle must provide common_runs(a_length, b_length, is_common), "
                f"got {type(self.oracle).__name__}"
            )
            raise ValueError(msg)
