# utils/validators.py
import warnings
from collections import namedtuple

import numpy as np
import pandas as pd

from cvdrisk.utils.errors import (
    BoundsViolationError,
    InvalidCategoryError,
    LengthMismatchError,
    MissingDataWarning,
    TypeMismatchError,
)

MissingDataReport = namedtuple("MissingDataReport", ["counts", "missing_rows", "n_rows"])

# -----------------------------
# Vector helpers
# -----------------------------

def is_missing(value):
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def as_vector(values):
    """Return values as a 1-d object array; scalars become length-1 vectors."""
    if isinstance(values, (pd.Series, pd.Index, pd.Categorical)):
        return np.asarray(values, dtype=object)
    if isinstance(values, str) or not np.iterable(values):
        return np.array([values], dtype=object)
    vector = np.empty(len(values), dtype=object)
    vector[:] = list(values)
    return vector


def as_numeric(values):
    return np.array([np.nan if is_missing(v) else float(v) for v in as_vector(values)], dtype=float)


def missing_mask(values):
    if isinstance(values, np.ndarray) and values.dtype.kind == "f":
        return np.isnan(values)
    return np.array([is_missing(v) for v in as_vector(values)], dtype=bool)


def vector_kind(values):
    """Runtime kind of a vector: numeric, character, logical or missing."""
    if isinstance(values, (np.ndarray, pd.Series)) and values.dtype.kind in "biuf":
        return "logical" if values.dtype.kind == "b" else "numeric"
    kinds = set()
    for value in as_vector(values):
        if is_missing(value):
            continue
        if isinstance(value, (bool, np.bool_)):
            kinds.add("logical")
        elif isinstance(value, (int, float, np.integer, np.floating)):
            kinds.add("numeric")
        elif isinstance(value, str):
            kinds.add("character")
        else:
            kinds.add(type(value).__name__)
    if not kinds:
        return "missing"
    return collapse_values(sorted(kinds), "and")


def collapse_values(values, last="or"):
    values = [str(v) for v in values]
    if len(values) <= 1:
        return "".join(values)
    return ", ".join(values[:-1]) + f" {last} " + values[-1]


def broadcast_inputs(n, **values):
    """Repeat length-1 inputs to length n; the engine itself never broadcasts."""
    out = {}
    for name, value in values.items():
        if value is None:
            out[name] = None
            continue
        vector = as_vector(value)
        if len(vector) == 1:
            vector = np.repeat(vector, n)
        elif len(vector) != n:
            raise LengthMismatchError(f"{name} should have length <1 or {n}>\nbut instead has length <{len(vector)}>")
        out[name] = vector
    return out

# -----------------------------
# Checks
# -----------------------------

def check_type(name, value, expected):
    expected = (expected,) if isinstance(expected, str) else tuple(expected)
    kind = vector_kind(value)
    if kind == "missing" or kind in expected:
        return
    raise TypeMismatchError(
        f"{name} should have type <{collapse_values(expected)}>\nbut instead has type <{kind}>"
    )


def check_length(name, value, expected):
    n = len(as_vector(value))
    if n != expected:
        raise LengthMismatchError(f"{name} should have length <{expected}>\nbut instead has length <{n}>")


def check_bounds(name, values, lower=-np.inf, upper=np.inf):
    values = np.asarray(values, dtype=float)
    observed = values[~np.isnan(values)]
    if observed.size == 0:
        return
    if observed.min() < lower:
        raise BoundsViolationError(name, float(observed.min()), lower, "lower")
    if observed.max() > upper:
        raise BoundsViolationError(name, float(observed.max()), upper, "upper")


def check_category(name, values, allowed):
    offending = []
    for value in values:
        if is_missing(value) or value in allowed or value in offending:
            continue
        offending.append(value)
    if offending:
        noun = "values" if len(offending) > 1 else "value"
        raise InvalidCategoryError(
            f"{name} should have values <{collapse_values(allowed)}>\n"
            f"but instead has {noun} <{collapse_values(offending, 'and')}>"
        )


def check_equal_lengths(**vectors):
    """Common length of the supplied vectors; None entries are skipped."""
    lengths = {name: len(as_vector(v)) for name, v in vectors.items() if v is not None}
    if len(set(lengths.values())) > 1:
        report = "\n".join(f"{name} has length {n}" for name, n in lengths.items())
        raise LengthMismatchError("all input data should have the same length:\n" + report)
    return next(iter(lengths.values()), 0)


def check_missing(vectors, stacklevel=2):
    """Warn once about missing entries across all vectors and count the affected rows."""
    counts = {}
    any_missing = None
    for name, values in vectors.items():
        mask = missing_mask(values)
        any_missing = mask if any_missing is None else any_missing | mask
        if mask.any():
            counts[name] = int(mask.sum())
    n_rows = 0 if any_missing is None else len(any_missing)
    missing_rows = 0 if any_missing is None else int(any_missing.sum())
    if counts:
        lines = [f"{name} has {count} missing values" for name, count in counts.items()]
        warnings.warn(
            "Input data have missing values:\n" + "\n".join(lines)
            + f"\nThese missing values account for {missing_rows} missing values in the output",
            MissingDataWarning,
            stacklevel=stacklevel + 1,
        )
    return MissingDataReport(counts, missing_rows, n_rows)
