from __future__ import annotations

import numpy as np

INITIAL_TAPE_LENGTH = 30000


class Tape:
    """Byte cells that grow to the right on demand and never shrink."""

    def __init__(self, length: int = INITIAL_TAPE_LENGTH):
        if length < 1:
            raise ValueError(f"tape length must be positive, got {length}")
        self.cells = np.zeros(length, dtype=np.uint8)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> int:
        return int(self.cells[index])

    def __setitem__(self, index: int, value: int) -> None:
        self.cells[index] = value & 0xFF

    def add(self, index: int, delta: int) -> None:
        self.cells[index] = (int(self.cells[index]) + delta) & 0xFF

    def ensure(self, index: int) -> None:
        """Append zero cells until `index` is addressable."""
        excess = index - len(self.cells) + 1
        if excess > 0:
            self.cells = np.concatenate((self.cells, np.zeros(excess, dtype=np.uint8)))

    def snapshot(self, count: int = 100) -> bytes:
        return self.cells[:count].tobytes()
