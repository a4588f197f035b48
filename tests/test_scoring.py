"""Tests for score keeping and difficulty scaling."""

import logging

import pytest

from grid_snake.scoring import ScoreBoard


def _eat(board: ScoreBoard, n: int) -> None:
    for _ in range(n):
        board.record_food()


class TestScoreBoardInit:
    def test_defaults(self):
        board = ScoreBoard()
        assert board.score == 0
        assert board.level == 0
        assert board.foods_eaten == 0
        assert board.tick_interval == pytest.approx(0.16)

    def test_interval_must_stay_positive(self):
        with pytest.raises(ValueError, match="positive"):
            ScoreBoard(base_interval=0.1, interval_step=0.02, max_level=6)

    def test_invalid_threshold(self):
        with pytest.raises(ValueError, match="level_threshold"):
            ScoreBoard(level_threshold=0)


class TestScoring:
    def test_score_per_food(self):
        board = ScoreBoard()
        for n in range(1, 8):
            board.record_food()
            assert board.score == n * 100
            assert board.foods_eaten == n

    def test_custom_score_per_food(self):
        board = ScoreBoard(score_per_food=10)
        _eat(board, 3)
        assert board.score == 30


class TestDifficulty:
    def test_level_zero_below_threshold(self):
        board = ScoreBoard()
        _eat(board, 4)
        assert board.score == 400
        assert board.level == 0
        assert board.tick_interval == pytest.approx(0.16)

    def test_first_level_at_500(self):
        board = ScoreBoard()
        _eat(board, 5)
        assert board.level == 1
        assert board.tick_interval == pytest.approx(0.14)

    def test_clamped_at_max_level(self):
        board = ScoreBoard()
        _eat(board, 30)
        assert board.score == 3000
        assert board.level == 6
        assert board.tick_interval == pytest.approx(0.04)
        _eat(board, 20)
        assert board.level == 6
        assert board.tick_interval == pytest.approx(0.04)

    def test_intervals_monotonic(self):
        board = ScoreBoard()
        intervals = []
        for _ in range(40):
            board.record_food()
            intervals.append(board.tick_interval)
        assert all(b <= a for a, b in zip(intervals, intervals[1:]))

    def test_update_reports_change(self):
        board = ScoreBoard()
        board.score = 1000
        assert board.update_difficulty()
        assert board.level == 2
        assert not board.update_difficulty()

    def test_level_never_decreases(self):
        board = ScoreBoard()
        board.score = 1500
        board.update_difficulty()
        board.score = 0
        assert not board.update_difficulty()
        assert board.level == 3
        assert board.tick_interval == pytest.approx(0.10)

    def test_interval_for(self):
        board = ScoreBoard()
        assert board.interval_for(0) == pytest.approx(0.16)
        assert board.interval_for(3) == pytest.approx(0.10)

    def test_level_up_logged(self, caplog):
        board = ScoreBoard()
        with caplog.at_level(logging.INFO, logger="grid_snake.scoring"):
            _eat(board, 5)
        assert "level 1" in caplog.text

    def test_to_dict(self):
        board = ScoreBoard()
        _eat(board, 5)
        d = board.to_dict()
        assert d["score"] == 500
        assert d["level"] == 1
        assert d["tick_interval"] == pytest.approx(0.14)
