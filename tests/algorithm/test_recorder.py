"""Tests for ChangeRecorder: map writes, counting, ancestor fill-in, cascades."""

from __future__ import annotations

import pytest

from json_structural_diff.algorithm.recorder import ChangeRecorder, Side
from json_structural_diff.result import Change, DiffCount, DiffResult


@pytest.fixture
def recorder() -> ChangeRecorder:
    """A fresh ChangeRecorder for each test."""
    return ChangeRecorder()


class TestRecord:
    def test_writes_change_and_root_placeholder(self, recorder: ChangeRecorder) -> None:
        recorder.record("x", "/a", Change.DELETE, Side.LEFT)
        assert recorder.diff_map(Side.LEFT) == {"/a": "delete", "": "child-update"}
        assert recorder.diff_map(Side.RIGHT) == {}

    def test_right_side(self, recorder: ChangeRecorder) -> None:
        recorder.record("x", "/a", Change.CREATE, Side.RIGHT)
        assert recorder.diff_map(Side.RIGHT) == {"/a": "create", "": "child-update"}
        assert recorder.diff_map(Side.LEFT) == {}

    def test_root_change_has_no_placeholder(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "", Change.UPDATE, Side.LEFT)
        assert recorder.diff_map(Side.LEFT) == {"": "update"}

    def test_every_ancestor_marked(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "/a/0/b", Change.UPDATE, Side.LEFT)
        assert recorder.diff_map(Side.LEFT) == {
            "/a/0/b": "update",
            "/a/0": "child-update",
            "/a": "child-update",
            "": "child-update",
        }

    def test_ancestor_fill_in_never_overwrites(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "/a", Change.UPDATE, Side.LEFT)
        recorder.record(2, "/a/b", Change.UPDATE, Side.LEFT)
        assert recorder.diff_map(Side.LEFT)["/a"] == Change.UPDATE

    def test_explicit_record_overwrites_placeholder(
        self, recorder: ChangeRecorder
    ) -> None:
        recorder.record(1, "/a/b", Change.UPDATE, Side.LEFT)
        recorder.record(1, "/a", Change.DELETE, Side.LEFT)
        assert recorder.diff_map(Side.LEFT)["/a"] == Change.DELETE

    def test_child_update_cannot_be_recorded(self, recorder: ChangeRecorder) -> None:
        with pytest.raises(ValueError, match="cannot record"):
            recorder.record(1, "/a", Change.CHILD_UPDATE, Side.LEFT)


class TestCascade:
    def test_deleted_container_marks_descendants(
        self, recorder: ChangeRecorder
    ) -> None:
        recorder.record({"b": [1, 2]}, "/a", Change.DELETE, Side.LEFT)
        assert recorder.diff_map(Side.LEFT) == {
            "/a": "delete",
            "": "child-update",
            "/a/b": "delete",
            "/a/b/0": "delete",
            "/a/b/1": "delete",
        }

    def test_created_container_marks_descendants(
        self, recorder: ChangeRecorder
    ) -> None:
        recorder.record([{"x": 1}], "/0", Change.CREATE, Side.RIGHT)
        assert recorder.diff_map(Side.RIGHT) == {
            "/0": "create",
            "": "child-update",
            "/0/0": "create",
            "/0/0/x": "create",
        }

    def test_update_does_not_cascade(self, recorder: ChangeRecorder) -> None:
        recorder.record({"b": 1}, "/a", Change.UPDATE, Side.LEFT)
        assert "/a/b" not in recorder.diff_map(Side.LEFT)

    def test_empty_container_has_nothing_to_cascade(
        self, recorder: ChangeRecorder
    ) -> None:
        recorder.record([], "/a", Change.DELETE, Side.LEFT)
        assert recorder.diff_map(Side.LEFT) == {"/a": "delete", "": "child-update"}


class TestCount:
    def test_starts_at_zero(self, recorder: ChangeRecorder) -> None:
        assert recorder.count == DiffCount(create=0, update=0, delete=0)

    def test_update_counts_half_per_side(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "/a", Change.UPDATE, Side.LEFT)
        assert recorder.count.update == pytest.approx(0.5)
        recorder.record(2, "/a", Change.UPDATE, Side.RIGHT)
        assert recorder.count.update == pytest.approx(1.0)

    def test_create_and_delete_count_one(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "/a", Change.DELETE, Side.LEFT)
        recorder.record(2, "/b", Change.CREATE, Side.RIGHT)
        assert recorder.count == DiffCount(create=1, update=0, delete=1)

    def test_cascaded_descendants_counted(self, recorder: ChangeRecorder) -> None:
        recorder.record({"b": {"c": 1}, "d": 2}, "/a", Change.DELETE, Side.LEFT)
        assert recorder.count.delete == pytest.approx(4.0)

    def test_child_update_not_counted(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "/a/b/c", Change.CREATE, Side.RIGHT)
        assert recorder.count.total == pytest.approx(1.0)

    def test_colliding_cascade_paths_counted_once(
        self, recorder: ChangeRecorder
    ) -> None:
        # "/x/a/b" is reached through key "a/b" and through "a" -> "b"
        recorder.record({"a/b": 1, "a": {"b": 2}}, "/x", Change.DELETE, Side.LEFT)
        left = recorder.diff_map(Side.LEFT)
        assert left == {
            "/x": "delete",
            "/x/a/b": "delete",
            "/x/a": "delete",
            "": "child-update",
        }
        assert recorder.count.delete == pytest.approx(3.0)

    def test_repeated_record_counted_once(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "/a/b", Change.UPDATE, Side.LEFT)
        recorder.record(2, "/a/b", Change.UPDATE, Side.LEFT)
        assert recorder.count.update == pytest.approx(0.5)

    def test_overwrite_moves_tally(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "/a/b", Change.UPDATE, Side.LEFT)
        recorder.record({"b": 1}, "/a", Change.DELETE, Side.LEFT)
        assert recorder.diff_map(Side.LEFT)["/a/b"] == "delete"
        assert recorder.count == DiffCount(create=0, update=0, delete=2)


class TestResult:
    def test_result_snapshot(self, recorder: ChangeRecorder) -> None:
        recorder.record(1, "/a", Change.DELETE, Side.LEFT)
        result = recorder.result()
        assert isinstance(result, DiffResult)
        assert result.diff_left == {"/a": "delete", "": "child-update"}
        assert result.count.delete == pytest.approx(1.0)

    def test_result_not_affected_by_later_records(
        self, recorder: ChangeRecorder
    ) -> None:
        recorder.record(1, "/a", Change.DELETE, Side.LEFT)
        result = recorder.result()
        recorder.record(1, "/b", Change.DELETE, Side.LEFT)
        assert "/b" not in result.diff_left
        assert result.count.delete == pytest.approx(1.0)

    def test_diff_map_is_a_copy(self, recorder: ChangeRecorder) -> None:
        recorder.diff_map(Side.LEFT)["/x"] = Change.DELETE
        assert recorder.diff_map(Side.LEFT) == {}
