from __future__ import annotations

from typing import Mapping, MutableMapping


def accumulate(counts: MutableMapping[str, int], symbol: str, count: int, scale: int = 1) -> None:
    counts[symbol] = counts.get(symbol, 0) + count * scale


def merge_counts(target: MutableMapping[str, int], source: Mapping[str, int], scale: int = 1) -> None:
    for symbol, count in source.items():
        accumulate(target, symbol, count, scale)


def total_atoms(counts: Mapping[str, int]) -> int:
    return sum(counts.values())
