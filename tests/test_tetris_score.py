import pytest

from tetris_score import Score, add_points, cleared_lines, level, new_score


def test_new_score():
    assert new_score() == Score(0, 0, False)
    assert level(new_score()) == 1


@pytest.mark.parametrize("lines, expected", [(0, 1), (9, 1), (10, 2), (19, 2), (25, 3)])
def test_level_every_ten_lines(lines, expected):
    assert level(Score(lines_cleared=lines)) == expected


@pytest.mark.parametrize("lines, points", [(1, 200), (2, 600), (3, 1000), (4, 1600)])
def test_line_clear_table_at_level_two(lines, points):
    score = cleared_lines(lines, Score(lines_cleared=10))
    assert score.points == points
    assert score.lines_cleared == 10 + lines
    assert score.last_clear_was_tetris == (lines == 4)


def test_back_to_back_tetris():
    score = cleared_lines(4, Score(lines_cleared=10, last_clear_was_tetris=True))
    assert score.points == 2400
    assert score.last_clear_was_tetris


def test_no_clear_keeps_the_chain():
    score = Score(points=50, lines_cleared=4, last_clear_was_tetris=True)
    assert cleared_lines(0, score) == score


@pytest.mark.parametrize("lines", [1, 2, 3])
def test_other_clears_break_the_chain(lines):
    assert not cleared_lines(lines, Score(last_clear_was_tetris=True)).last_clear_was_tetris


def test_more_than_four_lines_counts_lines_only():
    score = cleared_lines(5, Score(points=10, last_clear_was_tetris=True))
    assert score == Score(points=10, lines_cleared=5, last_clear_was_tetris=False)


def test_add_points():
    assert add_points(3, Score(points=4, lines_cleared=2)) == Score(7, 2, False)
