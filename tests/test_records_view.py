import pytest

from doublejumper.records import Record, RecordDatabase
from doublejumper.records_view import (
    DATE_OFFSET,
    DELIMITER_OFFSET,
    LEFT_X,
    ROW_HEIGHT,
    SCROLL_STEP,
    TOP_Y,
    RecordsView,
)


@pytest.fixture
def records():
    return [
        Record("a", "d1", 5),
        Record("b", "d2", 50),
        Record("c", "d3", 20),
    ]


def test_best_record_first(records):
    rows = RecordsView(records).layout()
    assert [row.text for row in rows] == ["b : 50", "c : 20", "a : 5"]
    assert [row.date for row in rows] == ["d2", "d3", "d1"]


def test_row_geometry(records):
    rows = RecordsView(records).layout()
    assert rows[0].y == TOP_Y
    assert all(row.x == LEFT_X for row in rows)
    for upper, lower in zip(rows, rows[1:]):
        assert lower.y - upper.y == ROW_HEIGHT
    for row in rows:
        assert row.date_y == row.y + DATE_OFFSET
        assert row.delimiter_y == row.y + DELIMITER_OFFSET


def test_scroll_down_moves_rows_up(records):
    view = RecordsView(records)
    assert view.scroll(-1) == SCROLL_STEP
    assert view.layout()[0].y == TOP_Y - SCROLL_STEP


def test_scroll_up_stops_at_top(records):
    view = RecordsView(records)
    assert view.scroll(1) == 0
    assert view.layout()[0].y == TOP_Y


def test_zero_delta_keeps_offset(records):
    view = RecordsView(records)
    view.scroll(-1)
    assert view.scroll(0) == SCROLL_STEP


def test_offset_divisible_by_three_is_nudged(records):
    view = RecordsView(records)
    for _ in range(3):
        view.scroll(-1)
    assert view.shift == 3 * SCROLL_STEP
    assert view.scroll(-1) == 3 * SCROLL_STEP + 1


def test_scroll_is_clamped(records):
    view = RecordsView(records)
    for _ in range(200):
        view.scroll(-1)
    assert 0 < view.shift <= view.max_shift + 1


def test_empty_table():
    view = RecordsView([])
    assert view.layout() == []
    assert view.max_shift == 0
    assert view.scroll(-1) == 0


def test_reads_database(tmp_path):
    db = RecordDatabase(tmp_path / "records.json")
    db.insert(Record("x", "d", 3))
    db.insert(Record("y", "d", 9))
    rows = RecordsView(db).layout()
    assert [row.text for row in rows] == ["y : 9", "x : 3"]