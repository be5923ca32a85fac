from __future__ import annotations

import logging

from chemcount.chem.atom_counts import total_atoms
from chemcount.chem.errors import FormulaError
from chemcount.chem.evaluator import evaluate
from chemcount.chem.formula_tree import Group, build_tree
from chemcount.chem.tokenizer import tokenize
from chemcount.options import ParserOptions


logger = logging.getLogger(__name__)


def parse_compound(formula: str, options: ParserOptions | None = None) -> dict[str, int]:
    """Return the total atom count of every symbol in ``formula``.

    >>> parse_compound("K3(Al(OH)6)")
    {'K': 3, 'Al': 1, 'O': 6, 'H': 6}

    Raises ``MalformedFormula`` or ``UnbalancedBrackets``; no partial result
    is ever returned.
    """
    tokens = tokenize(formula, options)
    try:
        counts = evaluate(tokens)
    except FormulaError as error:
        error.formula = formula
        raise
    logger.debug("Parsed %r: %d symbols, %d atoms", formula, len(counts), total_atoms(counts))
    return counts


def parse_compound_tree(formula: str, options: ParserOptions | None = None) -> Group:
    tokens = tokenize(formula, options)
    try:
        return build_tree(tokens)
    except FormulaError as error:
        error.formula = formula
        raise


def count_element(formula: str, symbol: str, options: ParserOptions | None = None) -> int:
    return parse_compound(formula, options).get(symbol, 0)
