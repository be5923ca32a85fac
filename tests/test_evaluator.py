from __future__ import annotations

import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from chemcount.chem.errors import MalformedFormula, UnbalancedBrackets
from chemcount.chem.evaluator import _resolve_group, evaluate
from chemcount.chem.tokenizer import tokenize
from chemcount.chem.tokens import Close, Element, Multiplier, Open


class EvaluatorTests(unittest.TestCase):
    def test_top_level_elements(self) -> None:
        self.assertEqual(evaluate([Element("H", 2), Element("O", 1), Element("H", 1)]), {"H": 3, "O": 1})

    def test_group_scale_applied_once(self) -> None:
        tokens = [Open(), Element("O", 1), Element("H", 1), Close(), Multiplier(3)]
        self.assertEqual(evaluate(tokens), {"O": 3, "H": 3})

    def test_nested_scales_compound(self) -> None:
        self.assertEqual(evaluate(tokenize("((O2)4)25")), {"O": 200})

    def test_deeply_nested_groups(self) -> None:
        self.assertEqual(evaluate(tokenize("(((H)2)3)5")), {"H": 30})

    def test_accepts_generators(self) -> None:
        self.assertEqual(evaluate(token for token in tokenize("Ca(OH)2")), {"Ca": 1, "O": 2, "H": 2})

    def test_empty_stream(self) -> None:
        self.assertEqual(evaluate([]), {})

    def test_close_without_open(self) -> None:
        with self.assertRaises(UnbalancedBrackets):
            evaluate([Element("H", 1), Close(), Multiplier(2)])

    def test_extra_close_after_balanced_group(self) -> None:
        with self.assertRaises(UnbalancedBrackets):
            evaluate(tokenize("(H)2)"))

    def test_unclosed_group(self) -> None:
        with self.assertRaises(UnbalancedBrackets):
            evaluate(tokenize("Na(OH"))

    def test_unclosed_outer_group(self) -> None:
        with self.assertRaises(UnbalancedBrackets):
            evaluate(tokenize("((OH)2"))

    def test_multiplier_without_close(self) -> None:
        with self.assertRaises(MalformedFormula):
            evaluate([Element("H", 1), Multiplier(2)])

    def test_close_without_multiplier(self) -> None:
        with self.assertRaises(MalformedFormula):
            evaluate([Open(), Element("H", 1), Close(), Element("O", 1)])
        with self.assertRaises(MalformedFormula):
            evaluate([Open(), Element("H", 1), Close()])

    def test_resolution_skips_closed_inner_brackets(self) -> None:
        stack = [Open(), Element("H", 1), Open(), Element("O", 1), Close(), Close()]
        counts: dict[str, int] = {}
        _resolve_group(2, counts, stack)
        self.assertEqual(stack, [])
        self.assertEqual(counts, {"H": 2, "O": 2})

    def test_resolution_keeps_inner_brackets_when_nested(self) -> None:
        stack = [Open(), Open(), Open(), Element("O", 1), Close(), Close()]
        _resolve_group(3, {}, stack)
        self.assertEqual(stack, [Open(), Open(), Element("O", 3), Close()])

    def test_unknown_token(self) -> None:
        with self.assertRaises(MalformedFormula):
            evaluate(["H2"])  # type: ignore[list-item]


if __name__ == "__main__":
    unittest.main()
