"""Score, level and the line-clear table"""
from dataclasses import dataclass, replace

LINES_PER_LEVEL = 10
SOFT_DROP_PER_CELL = 1         # Score per soft-drop cell
HARD_DROP_PER_CELL = 2         # Score per hard-drop cell

# Line clear points, multiplied by level
SCORE_TABLE = {1: 100, 2: 300, 3: 500, 4: 800}
BACK_TO_BACK_TETRIS = 1200


@dataclass(frozen=True)
class Score:
    points: int = 0
    lines_cleared: int = 0
    last_clear_was_tetris: bool = False


def new_score() -> Score:
    return Score()


def level(score: Score) -> int:
    """Level 1 at the start, one more every LINES_PER_LEVEL lines."""
    return score.lines_cleared // LINES_PER_LEVEL + 1


def cleared_lines(lines: int, score: Score) -> Score:
    """Score a lock that cleared `lines` rows.

    A lock that clears nothing leaves the back-to-back chain alone; only a
    non-zero clear of anything but four lines breaks it.
    """
    if lines == 0:
        return score
    if lines == 4 and score.last_clear_was_tetris:
        base = BACK_TO_BACK_TETRIS
    else:
        base = SCORE_TABLE.get(lines, 0)
    return Score(
        points=score.points + base * level(score),
        lines_cleared=score.lines_cleared + lines,
        last_clear_was_tetris=lines == 4,
    )


def add_points(points: int, score: Score) -> Score:
    return replace(score, points=score.points + points)
