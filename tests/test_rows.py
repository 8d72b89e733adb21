import pytest

from chnative.rows import Rows


def _failing_stream():
    yield [[1]]
    raise ConnectionError("broken")


def _recording_stream(produced, count):
    for value in range(count):
        produced.append(value)
        yield [[value]]


def test_rows_from_several_blocks():
    blocks = [
        [[1, 2], ["a", "b"]],
        [[3], ["c"]],
    ]
    rows = Rows(["n", "s"], blocks)
    assert list(rows) == [(1, "a"), (2, "b"), (3, "c")]


def test_columns_kept():
    rows = Rows(["n", "s"], [])
    assert rows.columns == ["n", "s"]


def test_empty_blocks_are_skipped():
    blocks = [[[], []], [[1], ["x"]], [[], []]]
    assert list(Rows(["n", "s"], blocks)) == [(1, "x")]


def test_no_blocks_yields_nothing():
    assert list(Rows(["n"], iter([]))) == []


def test_error_from_stream_propagates():
    rows = Rows(["n"], _failing_stream())
    assert next(rows) == (1,)
    with pytest.raises(ConnectionError):
        next(rows)


def test_result_sets_totals_then_extremes():
    rows = Rows(["n"], [[[1, 2]]], totals=[[3]], extremes=[[0, 9]])
    assert list(rows) == [(1,), (2,)]
    assert rows.has_next_result_set()
    assert rows.next_result_set() is True
    assert list(rows) == [(3,)]
    assert rows.has_next_result_set()
    assert rows.next_result_set() is True
    assert list(rows) == [(0,), (9,)]
    assert not rows.has_next_result_set()
    assert rows.next_result_set() is False


def test_empty_totals_is_not_a_result_set():
    rows = Rows(["n"], [], totals=[[]], extremes=None)
    assert not rows.has_next_result_set()
    assert rows.next_result_set() is False


def test_close_drains_stream_and_stops_iteration():
    produced = []
    rows = Rows(["n"], _recording_stream(produced, 3))
    assert next(rows) == (0,)
    rows.close()
    assert produced == [0, 1, 2]
    assert rows.columns == []
    assert list(rows) == []


def test_context_manager_closes():
    produced = []
    with Rows(["n"], _recording_stream(produced, 2)) as rows:
        first = next(rows)
    assert first == (0,)
    assert produced == [0, 1]
    with pytest.raises(StopIteration):
        next(rows)