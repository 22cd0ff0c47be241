"""Tests for key reordering and chronological sorting (core/reorganizer.py)."""

from __future__ import annotations

from cx_cli.core.reorganizer import (
    is_complex,
    log_only_view,
    reorganize,
    sort_chronological,
)


# ---------------------------------------------------------------------------
# Partition
# ---------------------------------------------------------------------------

class TestIsComplex:
    def test_lists_are_complex_even_when_empty(self) -> None:
        assert is_complex([1])
        assert is_complex([])

    def test_non_empty_mapping_is_complex(self) -> None:
        assert is_complex({"x": 1})

    def test_empty_mapping_and_scalars_are_simple(self) -> None:
        assert not is_complex({})
        assert not is_complex("text")
        assert not is_complex(0)
        assert not is_complex(None)


class TestReorganize:
    def test_simple_fields_come_first(self) -> None:
        result = reorganize({"b": [1, 2], "a": 5, "c": {"x": 1}})
        assert list(result) == ["a", "b", "c"]  # type: ignore[arg-type]

    def test_relative_order_kept_within_groups(self) -> None:
        doc = {"z": {"k": 1}, "y": 1, "x": [1], "w": "s", "v": {}}
        assert list(reorganize(doc)) == ["y", "w", "v", "z", "x"]  # type: ignore[arg-type]

    def test_values_and_key_set_preserved(self) -> None:
        doc = {"b": [1, 2], "a": 5, "c": {"x": 1}}
        assert reorganize(doc) == doc

    def test_nested_mappings_not_reordered(self) -> None:
        doc = {"profile": {"nested": {"x": 1}, "flat": 2}}
        result = reorganize(doc)
        assert list(result["profile"]) == ["nested", "flat"]  # type: ignore[index]

    def test_non_mapping_documents_returned_unchanged(self) -> None:
        items = [{"b": [1], "a": 1}]
        assert reorganize(items) is items
        assert reorganize("text") == "text"

    def test_input_not_mutated(self) -> None:
        events = [
            {"timestamp": "2025-01-02T00:00:00Z"},
            {"timestamp": "2025-01-01T00:00:00Z"},
        ]
        doc = {"events": events}
        reorganize(doc)
        assert events[0]["timestamp"] == "2025-01-02T00:00:00Z"


# ---------------------------------------------------------------------------
# Sort
# ---------------------------------------------------------------------------

class TestChronologicalSort:
    def test_events_sorted_by_timestamp(self) -> None:
        first = {"timestamp": "2025-01-02T00:00:00Z"}
        second = {"timestamp": "2025-01-01T00:00:00Z"}
        result = reorganize({"events": [first, second]})
        assert result["events"] == [second, first]  # type: ignore[index]

    def test_log_falls_back_to_time(self) -> None:
        late = {"time": "2025-01-03T00:00:00Z"}
        early = {"timestamp": "2025-01-01T00:00:00Z"}
        middle = {"time": "2025-01-02T00"}
        result = sort_chronological("log", [late, early, middle])
        assert result == [early, middle, late]

    def test_missing_timestamps_sort_as_epoch(self) -> None:
        dated = {"timestamp": "2025-01-01T00:00:00Z"}
        undated = {"message": "no time"}
        result = sort_chronological("events", [dated, undated])
        assert result == [undated, dated]

    def test_non_mapping_entries_sort_as_epoch(self) -> None:
        dated = {"timestamp": "2025-01-01T00:00:00Z"}
        result = sort_chronological("log", [dated, "raw line"])
        assert result == ["raw line", dated]

    def test_sort_is_stable_for_equal_instants(self) -> None:
        a = {"timestamp": "2025-01-01T00:00:00Z", "n": 1}
        b = {"timestamp": "2025-01-01T00:00:00.000Z", "n": 2}
        assert sort_chronological("events", [a, b]) == [a, b]

    def test_other_keys_not_sorted(self) -> None:
        values = [{"timestamp": "2025-01-02"}, {"timestamp": "2025-01-01"}]
        assert sort_chronological("items", values) is values

    def test_events_sort_ignores_time_field(self) -> None:
        a = {"time": "2025-01-02T00:00:00Z"}
        b = {"time": "2025-01-01T00:00:00Z"}
        assert sort_chronological("events", [a, b]) == [a, b]


# ---------------------------------------------------------------------------
# Log-only view
# ---------------------------------------------------------------------------

class TestLogOnlyView:
    def test_extracts_log(self) -> None:
        session = {"id": "s1", "log": [{"time": "x"}]}
        assert log_only_view(session) == {"log": [{"time": "x"}]}

    def test_missing_log_returns_none(self) -> None:
        assert log_only_view({"id": "s1"}) is None

    def test_non_mapping_returns_none(self) -> None:
        assert log_only_view([1, 2]) is None
