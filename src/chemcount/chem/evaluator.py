from __future__ import annotations

import logging
from typing import Iterable

from chemcount.chem.atom_counts import accumulate
from chemcount.chem.errors import MalformedFormula, UnbalancedBrackets
from chemcount.chem.tokens import Close, Element, Multiplier, Open, Token


logger = logging.getLogger(__name__)


def _resolve_group(scale: int, counts: dict[str, int], stack: list[Token]) -> None:
    """Fold the innermost open group into its parent scope.

    The stack ends with the group's ``Close``. Everything popped down to the
    matching ``Open`` is the group's content. A top-level group goes straight
    into ``counts``; a nested one is pushed back with its counts scaled so the
    enclosing group compounds further when it closes.
    """
    stack.pop()
    content: list[Token] = []
    depth = 0
    while True:
        if not stack:
            raise UnbalancedBrackets("Closing bracket ')' has no matching '('.")
        token = stack.pop()
        if isinstance(token, Close):
            # evaluate() resolves each Close as soon as its multiplier arrives,
            # so only a stack built outside it can hold one here
            depth += 1
        elif isinstance(token, Open):
            if depth == 0:
                break
            depth -= 1
        content.append(token)
    content.reverse()

    if not stack:
        for token in content:
            if isinstance(token, Element):
                accumulate(counts, token.symbol, token.count, scale)
        logger.debug("Resolved top-level group of %d tokens with scale %d", len(content), scale)
        return

    for token in content:
        stack.append(token.scaled(scale) if isinstance(token, Element) else token)
    logger.debug("Resolved nested group of %d tokens with scale %d", len(content), scale)


def evaluate(tokens: Iterable[Token]) -> dict[str, int]:
    """Accumulate atom counts from a token stream produced by ``tokenize``."""
    counts: dict[str, int] = {}
    stack: list[Token] = []
    previous: Token | None = None
    for token in tokens:
        if isinstance(previous, Close) and not isinstance(token, Multiplier):
            raise MalformedFormula("Closing bracket ')' is not followed by a multiplier.")
        if isinstance(token, Multiplier):
            if not isinstance(previous, Close):
                raise MalformedFormula(f"Multiplier {token.value} does not follow a closing bracket.")
            _resolve_group(token.value, counts, stack)
        elif isinstance(token, Element):
            if stack:
                stack.append(token)
            else:
                accumulate(counts, token.symbol, token.count)
        elif isinstance(token, (Open, Close)):
            stack.append(token)
        else:
            raise MalformedFormula(f"Unexpected token {token!r}.")
        previous = token

    if isinstance(previous, Close):
        raise MalformedFormula("Closing bracket ')' is not followed by a multiplier.")
    if stack:
        unclosed = sum(1 for token in stack if isinstance(token, Open))
        raise UnbalancedBrackets(f"{unclosed} group(s) opened with '(' are never closed.")
    return counts
