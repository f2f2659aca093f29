"""pytest plugin for json-structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_structural_diff import DiffConfig, compare


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable asserting two JSON documents do not differ.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JsonDiffComparator per call).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged(load(dump(doc)), doc)

        def test_detects_change(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"/name"):
                assert_json_unchanged({"name": "x"}, {"name": "y"})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when the comparison records any change.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are structurally identical.

        Args:
            actual:   The actual JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            config:   Optional DiffConfig, e.g. ``null_equals_missing=True``.

        Raises:
            AssertionError: When any change is recorded, with a message
                listing the changed paths, the count and both diff maps.
        """
        result = compare(actual, expected, config=config)
        if not result.is_empty:
            wire = result.to_dict()
            raise AssertionError(
                f"JSON documents differ at {result.changed_paths()}\n"
                f"  count: {wire['count']}\n"
                f"  diff_left (actual):    {wire['diffLeft']}\n"
                f"  diff_right (expected): {wire['diffRight']}"
            )

    return _assert
