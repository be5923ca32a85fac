from __future__ import annotations

import logging
import re

from chemcount.chem.errors import MalformedFormula
from chemcount.chem.tokens import Close, Element, Multiplier, Open, Token
from chemcount.options import ParserOptions, default_options


logger = logging.getLogger(__name__)

_TOKEN_PATTERN = re.compile(
    r"(?P<element>[A-Z][a-z]*)(?P<count>[0-9]*)"
    r"|(?P<open>\()"
    r"|(?P<close>\))"
    r"|(?P<number>[0-9]+)"
    r"|(?P<stray>.)",
    re.DOTALL,
)
_SUBSCRIPT_MAP = str.maketrans("₀₁₂₃₄₅₆₇₈₉", "0123456789")


def _read_number(digits: str, formula: str, position: int, options: ParserOptions) -> int:
    limit = options.max_count
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(limit)) or int(significant) > limit:
        raise MalformedFormula(
            f"Number '{significant}' at position {position} exceeds the limit of {limit}.",
            formula,
            position,
        )
    return int(significant)


def _describe_stray(char: str) -> str:
    if char.islower():
        return f"Symbol cannot start with lowercase letter '{char}'"
    if char.isspace():
        return "Unexpected whitespace"
    return f"Unexpected character {char!r}"


def tokenize(formula: str, options: ParserOptions | None = None) -> tuple[Token, ...]:
    """Split a formula into element, bracket and multiplier tokens.

    Every element carries an explicit count (1 when the formula omits it) and
    every ``Close`` is followed by exactly one ``Multiplier`` (1 when omitted).
    """
    if not isinstance(formula, str) or not formula:
        raise MalformedFormula("Formula must be a non-empty string.", formula if isinstance(formula, str) else None)
    options = options or default_options()
    text = formula.translate(_SUBSCRIPT_MAP) if options.normalize_subscripts else formula

    tokens: list[Token] = []
    after_close = False
    for match in _TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        position = match.start()
        if kind == "count":
            # the count group always participates, even when empty
            kind = "element"
        if kind == "stray":
            raise MalformedFormula(f"{_describe_stray(match.group())} at position {position}.", formula, position)

        if kind == "number":
            if not after_close:
                raise MalformedFormula(
                    f"Number '{match.group()}' at position {position} does not follow an element or ')'.",
                    formula,
                    position,
                )
            tokens.append(Multiplier(_read_number(match.group(), formula, position, options)))
            after_close = False
            continue

        if after_close:
            tokens.append(Multiplier(1))
            after_close = False

        if kind == "element":
            digits = match.group("count")
            count = _read_number(digits, formula, match.start("count"), options) if digits else 1
            tokens.append(Element(match.group("element"), count))
        elif kind == "open":
            tokens.append(Open())
        else:
            if tokens and isinstance(tokens[-1], Open):
                raise MalformedFormula(f"Empty group at position {position - 1}.", formula, position - 1)
            tokens.append(Close())
            after_close = True

    if after_close:
        tokens.append(Multiplier(1))

    logger.debug("Tokenized %r into %d tokens", formula, len(tokens))
    return tuple(tokens)
