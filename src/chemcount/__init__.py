from __future__ import annotations

from chemcount.chem.errors import FormulaError, MalformedFormula, UnbalancedBrackets
from chemcount.chem.evaluator import evaluate
from chemcount.chem.formula_parser import count_element, parse_compound, parse_compound_tree
from chemcount.chem.formula_tree import Atom, Group, build_tree, fold_tree
from chemcount.chem.tokenizer import tokenize
from chemcount.chem.tokens import Close, Element, Multiplier, Open, Token, render_tokens
from chemcount.options import ParserOptions, default_options, load_options

__all__ = [
    "Atom",
    "Close",
    "Element",
    "FormulaError",
    "Group",
    "MalformedFormula",
    "Multiplier",
    "Open",
    "ParserOptions",
    "Token",
    "UnbalancedBrackets",
    "build_tree",
    "count_element",
    "default_options",
    "evaluate",
    "fold_tree",
    "load_options",
    "parse_compound",
    "parse_compound_tree",
    "render_tokens",
    "tokenize",
]
