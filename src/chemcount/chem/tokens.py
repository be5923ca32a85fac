from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Element:
    symbol: str
    count: int

    def scaled(self, scale: int) -> Element:
        return Element(self.symbol, self.count * scale)

    def __str__(self) -> str:
        return f"{self.symbol}{self.count}"


@dataclass(frozen=True)
class Open:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class Close:
    def __str__(self) -> str:
        return ")"


@dataclass(frozen=True)
class Multiplier:
    value: int

    def __str__(self) -> str:
        return str(self.value)


Token = Union[Element, Open, Close, Multiplier]


def render_tokens(tokens: Iterable[Token]) -> list[str]:
    return [str(token) for token in tokens]
