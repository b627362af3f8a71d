# utils/normalize.py
from collections.abc import Mapping

import numpy as np

from cvdrisk.utils.errors import ConfigurationError
from cvdrisk.utils.validators import as_vector, collapse_values, is_missing

# -----------------------------
# Category level maps
# -----------------------------

def _text(value):
    """Comparison key for a raw category: case-folded text, whole floats without the '.0'."""
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value)).casefold()
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value).casefold()


def validate_levels(name, levels, expected_names):
    """Check a level map against its canonical names and return {canonical: aliases}.

    Aliases may be given as a single value or a collection of values; every
    canonical name must be present and no alias may belong to two names.
    """
    expected = tuple(expected_names)
    label = f"{name}_levels"
    if not isinstance(levels, Mapping):
        raise ConfigurationError(
            f"{label} should be a mapping of <{collapse_values(expected, 'and')}> to accepted values\n"
            f"but instead has type <{type(levels).__name__}>"
        )
    if len(levels) != len(expected):
        raise ConfigurationError(f"{label} should have length <{len(expected)}>\nbut instead has length <{len(levels)}>")
    if set(levels) != set(expected):
        raise ConfigurationError(
            f"{label} should have names <{collapse_values(expected, 'and')}>\n"
            f"but instead has names <{collapse_values(list(levels), 'and')}>"
        )

    validated = {}
    owners = {}
    for canonical in expected:
        aliases = levels[canonical]
        if isinstance(aliases, (str, int, float)) or not np.iterable(aliases):
            aliases = (aliases,)
        aliases = tuple(aliases)
        if not aliases or any(is_missing(a) or not isinstance(a, (str, int, float, np.number)) for a in aliases):
            raise ConfigurationError(f"{label}['{canonical}'] should be a non-empty collection of strings or numbers")
        for alias in aliases:
            key = _text(alias)
            if owners.setdefault(key, canonical) != canonical:
                raise ConfigurationError(f"{label} maps '{alias}' to both '{owners[key]}' and '{canonical}'")
        validated[canonical] = aliases
    return validated


def normalize_categories(values, levels):
    """Map raw values to canonical names; unmapped values pass through, missing becomes None."""
    lookup = {_text(alias): canonical for canonical, aliases in levels.items() for alias in aliases}
    vector = as_vector(values)
    out = np.empty(len(vector), dtype=object)
    for i, value in enumerate(vector):
        out[i] = None if is_missing(value) else lookup.get(_text(value), value)
    return out


def indicator(values, level="yes"):
    """1.0 where values equal level, 0.0 elsewhere, NaN where missing."""
    return np.array([np.nan if v is None else float(v == level) for v in values], dtype=float)
