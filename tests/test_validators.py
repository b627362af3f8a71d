import warnings

import numpy as np
import pandas as pd
import pytest

from cvdrisk.utils.errors import (
    BoundsViolationError,
    InvalidCategoryError,
    LengthMismatchError,
    MissingDataWarning,
    TypeMismatchError,
)
from cvdrisk.utils.validators import (
    as_numeric,
    broadcast_inputs,
    check_bounds,
    check_category,
    check_equal_lengths,
    check_length,
    check_missing,
    check_type,
    vector_kind,
)


def test_vector_kind():
    assert vector_kind([1, 2.5, None]) == "numeric"
    assert vector_kind(np.array([1, 2])) == "numeric"
    assert vector_kind(pd.Series([1, None], dtype="Int64")) == "numeric"
    assert vector_kind(["a", None]) == "character"
    assert vector_kind([True, False]) == "logical"
    assert vector_kind([None, np.nan]) == "missing"
    assert vector_kind([1, "a"]) == "character and numeric"


def test_check_type_unifies_integers_and_floats():
    check_type("age_years", [40, 50.5], "numeric")


def test_check_type_rejects_character_for_numeric():
    with pytest.raises(TypeMismatchError, match="age_years should have type <numeric>\nbut instead has type <character>"):
        check_type("age_years", ["40"], "numeric")


def test_check_type_error_is_also_a_type_error():
    with pytest.raises(TypeError):
        check_type("override_boundary_errors", [1], "logical")


def test_check_length():
    check_length("equation_version", "Goff_2013", 1)
    with pytest.raises(LengthMismatchError, match="should have length <1>\nbut instead has length <2>"):
        check_length("equation_version", ["Goff_2013", "Khan_2023"], 1)


def test_check_bounds_ignores_missing_values():
    check_bounds("age_years", np.array([40.0, np.nan, 79.0]), 40, 80)
    check_bounds("age_years", np.array([np.nan, np.nan]), 40, 80)


def test_check_bounds_reports_observed_and_bound():
    with pytest.raises(BoundsViolationError, match=r"min\(age_years\) is 35 but should be >= 40") as info:
        check_bounds("age_years", np.array([35.0, 50.0]), 40, 80)
    assert info.value.observed == 35
    assert info.value.bound == 40
    assert info.value.side == "lower"

    with pytest.raises(BoundsViolationError, match=r"max\(bp_sys_mmhg\) is 210 but should be <= 200"):
        check_bounds("bp_sys_mmhg", np.array([120.0, 210.0]), 90, 200)


def test_check_category_lists_offending_values():
    with pytest.raises(InvalidCategoryError, match="should have values <female or male>\nbut instead has values <woman, men and man>"):
        check_category("sex", ["woman", "men", "female", "man", "woman"], ("female", "male"))


def test_check_category_allows_missing():
    check_category("sex", ["female", None, "male"], ("female", "male"))


def test_check_equal_lengths_reports_each_variable():
    assert check_equal_lengths(a=[1, 2], b=["x", "y"], c=None) == 2
    with pytest.raises(LengthMismatchError, match="same length:\na has length 2\nb has length 1"):
        check_equal_lengths(a=[1, 2], b=[1])


def test_check_missing_warns_once_and_counts_rows():
    vectors = {
        "age_years": as_numeric([50, np.nan, 60, np.nan]),
        "sex": np.array(["female", None, None, "male"], dtype=object),
    }
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        report = check_missing(vectors)
    messages = [str(w.message) for w in caught if issubclass(w.category, MissingDataWarning)]
    assert len(messages) == 1
    assert "age_years has 2 missing values" in messages[0]
    assert "sex has 2 missing values" in messages[0]
    assert "account for 3 missing values in the output" in messages[0]
    assert report.counts == {"age_years": 2, "sex": 2}
    assert report.missing_rows == 3
    assert report.n_rows == 4


def test_check_missing_is_silent_for_complete_data():
    with warnings.catch_warnings():
        warnings.simplefilter("error", MissingDataWarning)
        report = check_missing({"age_years": as_numeric([50, 60])})
    assert report.missing_rows == 0


def test_broadcast_inputs():
    out = broadcast_inputs(3, age_years=55, sex=["female", "male", "male"], race=None)
    assert out["age_years"].tolist() == [55, 55, 55]
    assert out["sex"].tolist() == ["female", "male", "male"]
    assert out["race"] is None
    with pytest.raises(LengthMismatchError):
        broadcast_inputs(3, sex=["female", "male"])
