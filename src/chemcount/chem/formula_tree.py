from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from chemcount.chem.atom_counts import accumulate, merge_counts
from chemcount.chem.errors import MalformedFormula, UnbalancedBrackets
from chemcount.chem.tokens import Close, Element, Multiplier, Open, Token


@dataclass(frozen=True)
class Atom:
    symbol: str
    count: int


@dataclass(frozen=True)
class Group:
    children: tuple[Node, ...]
    scale: int = 1


Node = Union[Atom, Group]


def build_tree(tokens: Iterable[Token]) -> Group:
    """Nest a token stream into groups; the returned root has scale 1."""
    frames: list[list[Node]] = [[]]
    tokens = iter(tokens)
    for token in tokens:
        if isinstance(token, Element):
            frames[-1].append(Atom(token.symbol, token.count))
        elif isinstance(token, Open):
            frames.append([])
        elif isinstance(token, Close):
            scale = next(tokens, None)
            if not isinstance(scale, Multiplier):
                raise MalformedFormula("Closing bracket ')' is not followed by a multiplier.")
            if len(frames) == 1:
                raise UnbalancedBrackets("Closing bracket ')' has no matching '('.")
            children = frames.pop()
            frames[-1].append(Group(tuple(children), scale.value))
        elif isinstance(token, Multiplier):
            raise MalformedFormula(f"Multiplier {token.value} does not follow a closing bracket.")
        else:
            raise MalformedFormula(f"Unexpected token {token!r}.")

    if len(frames) != 1:
        raise UnbalancedBrackets(f"{len(frames) - 1} group(s) opened with '(' are never closed.")
    return Group(tuple(frames[0]))


def fold_tree(root: Group) -> dict[str, int]:
    """Total the tree bottom-up; each group folds its children before scaling.

    Walks post-order with an explicit frame per open group, so nesting depth
    is not bounded by the interpreter's recursion limit.
    """
    frames: list[tuple[Group, Iterator[Node], dict[str, int]]] = [(root, iter(root.children), {})]
    while True:
        group, children, counts = frames[-1]
        child = next(children, None)
        if child is None:
            frames.pop()
            parent = frames[-1][2] if frames else {}
            merge_counts(parent, counts, group.scale)
            if not frames:
                return parent
        elif isinstance(child, Atom):
            accumulate(counts, child.symbol, child.count)
        else:
            frames.append((child, iter(child.children), {}))
