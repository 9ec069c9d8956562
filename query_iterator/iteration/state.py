from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Unbooted:
    """Ни один чанк ещё не загружен (после создания или rewind)."""


@dataclass(frozen=True, slots=True)
class Loaded:
    index: int

    def next_index(self) -> int:
        return self.index + 1


ChunkState = Union[Unbooted, Loaded]

UNBOOTED = Unbooted()


def next_chunk_index(state: ChunkState) -> int:
    if isinstance(state, Loaded):
        return state.next_index()
    return 0
