"""7-bag randomizer carried as an immutable value"""
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from tetris_piece import BLOCK_KINDS, TETROMINOES, Tetromino


def lcg_next(state: int) -> int:
    """Advance a 32-bit LCG state (multiplier 0x41C64E6D, increment 0x3039)."""
    return (state * 0x41C64E6D + 0x3039) & 0xFFFFFFFF


def rand15(state: int) -> int:
    """The 15 high-order bits of an LCG state."""
    return (state >> 16) & 0x7FFF


@dataclass(frozen=True)
class Bag:
    """Residual kinds still to come in this cycle, plus the generator state.

    Drawing never changes the bag it is called on: it returns the piece and
    the bag to draw from next time.
    """
    state: int
    residual: Tuple[str, ...] = BLOCK_KINDS

    def draw(self) -> Tuple[Tetromino, "Bag"]:
        residual = self.residual or BLOCK_KINDS
        n = len(residual)
        # reject the top partial range so every index is equally likely
        limit = 0x8000 - 0x8000 % n
        state = lcg_next(self.state)
        while rand15(state) >= limit:
            state = lcg_next(state)
        i = rand15(state) % n
        return TETROMINOES[residual[i]], Bag(state, residual[:i] + residual[i + 1:])


def new_bag(seed: Optional[int] = None) -> Bag:
    if seed is None:
        seed = random.getrandbits(32)
    return Bag(seed & 0xFFFFFFFF)
