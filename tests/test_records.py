import json

import pytest

from doublejumper.records import Record, RecordDatabase


@pytest.fixture
def path(tmp_path):
    return tmp_path / "records.json"


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_dict_round_trip():
    record = Record("alice", "05.03.2025 12:30", 420)
    data = record.to_dict()
    assert set(data) == {"score", "playerName", "recordDate"}
    assert Record.from_dict(data) == record


def test_from_dict_defaults():
    record = Record.from_dict({})
    assert (record.player_name, record.record_date, record.score) == ("", "", 0)


@pytest.mark.parametrize("raw, expected", [(12.0, 12), (12.5, 0), ("12", 0), (True, 0)])
def test_from_dict_score_conversion(raw, expected):
    assert Record.from_dict({"score": raw}).score == expected


def test_records_order_by_score():
    low = Record("b", "", 10)
    high = Record("a", "", 20)
    assert low < high
    assert not high < low
    assert sorted([high, low]) == [low, high]


def test_save_appends(path):
    Record("a", "d1", 1).save(path)
    Record("b", "d2", 2).save(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert [Record.from_dict(d) for d in data] == [Record("a", "d1", 1), Record("b", "d2", 2)]


def test_save_replaces_non_array(path):
    _write(path, {"not": "an array"})
    Record("a", "d", 5).save(path)
    assert json.loads(path.read_text(encoding="utf-8")) == [Record("a", "d", 5).to_dict()]


def test_load_sorts_and_drops_duplicate_scores(path):
    _write(
        path,
        [
            Record("c", "", 30).to_dict(),
            Record("a", "", 10).to_dict(),
            Record("dup", "", 30).to_dict(),
            "junk",
            Record("b", "", 20).to_dict(),
        ],
    )
    db = RecordDatabase(path)
    assert [r.player_name for r in db] == ["a", "b", "c"]
    assert [r.score for r in reversed(db)] == [30, 20, 10]
    assert len(db) == 3


def test_missing_file_gives_empty_database(path):
    db = RecordDatabase(path)
    assert db.records == []


def test_invalid_json_keeps_previous_records(path):
    _write(path, [Record("a", "", 1).to_dict()])
    db = RecordDatabase(path)
    path.write_text("{broken", encoding="utf-8")
    db.load()
    assert db.records == [Record("a", "", 1)]


def test_insert_persists(path):
    db = RecordDatabase(path)
    assert db.insert(Record("alice", "d", 100)) is True
    assert RecordDatabase(path).records == [Record("alice", "d", 100)]


def test_insert_same_score_is_refused(path):
    db = RecordDatabase(path)
    db.insert(Record("alice", "d", 100))
    before = path.read_text(encoding="utf-8")
    assert db.insert(Record("bob", "e", 100)) is False
    assert path.read_text(encoding="utf-8") == before
    assert [r.player_name for r in db] == ["alice"]


def test_reset_empties_file_and_records(path):
    db = RecordDatabase(path)
    db.insert(Record("alice", "d", 100))
    db.reset()
    assert path.read_text(encoding="utf-8") == ""
    assert len(db) == 0
    assert RecordDatabase(path).records == []