import json

from adastra.scores import MAX_ENTRIES, HighScoreEntry, HighScoreTable


def test_missing_file_loads_empty(tmp_path):
    table = HighScoreTable(tmp_path / "none.json")
    table.load()
    assert table.entries() == []


def test_add_and_reload_round_trip(tmp_path):
    path = tmp_path / "scores.json"
    table = HighScoreTable(path)
    assert table.add("ACE", 500) is True
    assert table.add("BOB", 900) is True
    other = HighScoreTable(path)
    other.load()
    assert other.entries() == [HighScoreEntry("BOB", 900), HighScoreEntry("ACE", 500)]


def test_non_positive_score_is_ignored(tmp_path):
    path = tmp_path / "scores.json"
    table = HighScoreTable(path)
    assert table.add("ZERO", 0) is False
    assert table.add("NEG", -5) is False
    assert table.entries() == []
    assert not path.exists()


def test_keeps_only_best_ten_sorted(tmp_path):
    table = HighScoreTable(tmp_path / "scores.json")
    for score in range(1, 16):
        table.add(f"P{score}", score * 10)
    scores = [e.score for e in table.entries()]
    assert len(scores) == MAX_ENTRIES
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == 150
    assert min(scores) == 60


def test_file_format_is_array_of_objects(tmp_path):
    path = tmp_path / "scores.json"
    table = HighScoreTable(path)
    table.add("ACE", 500)
    data = json.loads(path.read_text())
    assert data == [{"name": "ACE", "score": 500}]


def test_invalid_json_clears_table(tmp_path):
    path = tmp_path / "scores.json"
    table = HighScoreTable(path)
    table.add("ACE", 500)
    path.write_text("not json at all")
    table.load()
    assert table.entries() == []


def test_missing_fields_default(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps([{"name": "ONLY"}, {"score": 42}, 7]))
    table = HighScoreTable(path)
    table.load()
    assert table.entries() == [
        HighScoreEntry("ONLY", 0),
        HighScoreEntry("", 42),
        HighScoreEntry("", 0),
    ]


def test_entries_returns_copy(tmp_path):
    table = HighScoreTable(tmp_path / "scores.json")
    table.add("ACE", 500)
    copy = table.entries()
    copy.clear()
    assert len(table.entries()) == 1


def test_save_to_unwritable_path_reports_false(tmp_path):
    table = HighScoreTable(tmp_path / "missing_dir" / "scores.json")
    assert table.save() is False