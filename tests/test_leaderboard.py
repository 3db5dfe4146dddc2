import json

import pytest

from snake_game.leaderboard import InvalidPlayerNameError, Leaderboard, Player
from snake_game.storage import MemoryStore

KEY = "snake.leaderboard"


def test_save_into_empty_store():
    board = Leaderboard(MemoryStore())
    assert board.load() == []
    result = board.save(Player("A", 3))
    assert result == [Player("A", 3)]
    assert json.loads(board.store.get(KEY)) == [{"name": "A", "score": 3}]


def test_load_sorts_and_truncates():
    records = [{"name": f"p{i}", "score": i} for i in range(15)]
    board = Leaderboard(MemoryStore({KEY: json.dumps(records)}))
    entries = board.load()
    assert len(entries) == 10
    assert [p.score for p in entries] == list(range(14, 4, -1))
    assert board.best() == Player("p14", 14)


def test_save_keeps_top_ten_sorted():
    board = Leaderboard(MemoryStore())
    for score in [5, 1, 9, 3, 7, 2, 8, 4, 6, 0, 10, 11]:
        entries = board.save(Player("x", score))
        assert len(entries) <= 10
        assert [p.score for p in entries] == sorted((p.score for p in entries), reverse=True)
    assert [p.score for p in board.entries] == [11, 10, 9, 8, 7, 6, 5, 4, 3, 2]


def test_low_score_does_not_enter_full_board():
    records = [{"name": "p", "score": 50} for _ in range(10)]
    board = Leaderboard(MemoryStore({KEY: json.dumps(records)}))
    entries = board.save(Player("late", 1))
    assert Player("late", 1) not in entries
    assert len(entries) == 10


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"name": "A", "score": 1}',
        '[{"name": "A"}]',
        '[{"name": "", "score": 2}]',
        '[{"name": "A", "score": "3"}]',
        "[1, 2]",
        pytest.param("[" * 200000, id="deeply-nested"),
    ],
)
def test_malformed_data_reads_as_empty(raw):
    board = Leaderboard(MemoryStore({KEY: raw}))
    assert board.load() == []
    assert board.best() is None


def test_save_over_malformed_data_replaces_it():
    board = Leaderboard(MemoryStore({KEY: "garbage"}))
    assert board.save(Player("B", 2)) == [Player("B", 2)]


def test_player_name_is_required():
    with pytest.raises(InvalidPlayerNameError):
        Player("   ")
    assert Player("  Ann ").name == "Ann"
