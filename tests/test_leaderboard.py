from __future__ import annotations

import json

from bounce_ball.leaderboard import LeaderboardStore, Record, format_rankings, normalise_name


def test_missing_file_is_empty(store: LeaderboardStore) -> None:
    assert store.load() == []


def test_corrupt_file_is_empty(store: LeaderboardStore) -> None:
    with open(store.path, "w", encoding="utf-8") as file:
        file.write("{not json")
    assert store.load() == []


def test_non_list_payload_is_empty(store: LeaderboardStore) -> None:
    with open(store.path, "w", encoding="utf-8") as file:
        json.dump({"name": "x"}, file)
    assert store.load() == []


def test_malformed_entries_are_skipped(store: LeaderboardStore) -> None:
    with open(store.path, "w", encoding="utf-8") as file:
        json.dump([{"name": "Ann", "score": 2, "time": 9}, "junk", {"name": "Bo", "score": "lots"}], file)
    assert store.load() == [Record("Ann", 2, 9)]


def test_ordering_score_then_time(store: LeaderboardStore) -> None:
    store.record("slow", 5, 40)
    store.record("low", 1, 3)
    store.record("fast", 5, 20)
    records = store.load()
    assert [record.name for record in records] == ["fast", "slow", "low"]
    for first, second in zip(records, records[1:]):
        assert (first.score, -first.time) >= (second.score, -second.time)


def test_only_top_five_are_kept(store: LeaderboardStore) -> None:
    for score in range(8):
        store.record(f"p{score}", score, 10)
    records = store.load()
    assert len(records) == 5
    assert [record.score for record in records] == [7, 6, 5, 4, 3]
    with open(store.path, encoding="utf-8") as file:
        assert len(json.load(file)) == 5


def test_persisted_format(store: LeaderboardStore) -> None:
    store.record("Alice", 3, 12)
    with open(store.path, encoding="utf-8") as file:
        assert json.load(file) == [{"name": "Alice", "score": 3, "time": 12}]


def test_blank_name_becomes_guest(store: LeaderboardStore) -> None:
    records = store.record("   ", 4, 7)
    assert records[0].name == "Guest"
    assert normalise_name(None) == "Guest"
    assert normalise_name(" Bob ") == "Bob"


def test_write_failure_keeps_rankings(tmp_path) -> None:
    blocked = tmp_path / "taken"
    blocked.mkdir()
    store = LeaderboardStore(str(blocked))
    records = store.record("Zed", 2, 5)
    assert records == [Record("Zed", 2, 5)]
    assert store.save(records) is False


def test_format_rankings() -> None:
    lines = format_rankings([Record("Alice", 3, 12), Record("Guest", 1, 4)])
    assert lines == [
        "Rank 1 : Alice - (Score: 3, Timer: 12s)",
        "Rank 2 : Guest - (Score: 1, Timer: 4s)",
    ]
    many = [Record(str(i), i, i) for i in range(9)]
    assert len(format_rankings(many)) == 5


def test_out_of_range_numbers_are_skipped(store: LeaderboardStore) -> None:
    with open(store.path, "w", encoding="utf-8") as file:
        file.write('[{"name": "x", "score": 1e400, "time": 1}, {"name": "y", "score": 2, "time": Infinity},'
                   ' {"name": "Ann", "score": 2, "time": 9}]')
    assert store.load() == [Record("Ann", 2, 9)]


def test_deeply_nested_file_is_empty(store: LeaderboardStore) -> None:
    with open(store.path, "w", encoding="utf-8") as file:
        file.write("[" * 200_000 + "]" * 200_000)
    assert store.load() == []


def test_recording_over_corrupt_file_starts_fresh(store: LeaderboardStore) -> None:
    with open(store.path, "w", encoding="utf-8") as file:
        file.write('[{"name": "x", "score": 1e400, "time": 1}]')
    assert store.record("Alice", 3, 12) == [Record("Alice", 3, 12)]
