from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
from importlib import resources
from pathlib import Path

import yaml


DEFAULTS_FILENAME = "defaults.yaml"


@dataclass(frozen=True)
class ParserOptions:
    """Knobs for the tokenizer; the grammar itself is fixed."""

    max_count: int = 2**64 - 1
    normalize_subscripts: bool = False


_OPTION_TYPES: dict[str, type] = {
    "max_count": int,
    "normalize_subscripts": bool,
}


def _coerce(data: object, base: ParserOptions, source: str) -> ParserOptions:
    if data is None:
        return base
    if not isinstance(data, dict):
        raise ValueError(f"{source}: expected a mapping of option names to values.")
    unknown = sorted(str(name) for name in data if name not in _OPTION_TYPES)
    if unknown:
        raise ValueError(f"{source}: unknown option(s) {', '.join(unknown)}.")
    for name, value in data.items():
        expected = _OPTION_TYPES[name]
        if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
            raise ValueError(f"{source}: option '{name}' must be an integer.")
        if expected is bool and not isinstance(value, bool):
            raise ValueError(f"{source}: option '{name}' must be true or false.")
    if "max_count" in data and data["max_count"] < 1:
        raise ValueError(f"{source}: option 'max_count' must be at least 1.")
    return replace(base, **data)


@lru_cache(maxsize=1)
def default_options() -> ParserOptions:
    raw = resources.files("chemcount").joinpath(DEFAULTS_FILENAME).read_text(encoding="utf-8")
    return _coerce(yaml.safe_load(raw), ParserOptions(), DEFAULTS_FILENAME)


def load_options(path: str | Path) -> ParserOptions:
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    return _coerce(data, default_options(), str(path))
