import numpy as np
import pandas as pd
import pytest

from cvdrisk.config.coefs_prevent import BASE_10, PREVENT_TERMS
from cvdrisk.utils.coefficients import (
    CoefficientTable,
    build_repository,
    prevent_tables_from_frame,
)
from cvdrisk.utils.errors import CoefficientLookupError, ConfigurationError


@pytest.fixture
def table():
    return CoefficientTable(
        name="example",
        key_names=("sex", "race"),
        keys=(("female", "black"), ("female", "white"), ("male", "black"), ("male", "white")),
        columns=("a", "b"),
        values=[[1.0, 10.0], [2.0, 20.0], [3.0, 30.0], [4.0, 40.0]],
    )


def test_take_follows_input_order(table):
    out = table.take(["male", "female", "male", "female"], ["white", "black", "black", "white"])
    assert out[:, 0].tolist() == [4.0, 1.0, 3.0, 2.0]


def test_take_gives_nan_rows_for_missing_keys(table):
    out = table.take(["male", None], ["white", "white"])
    assert out[0].tolist() == [4.0, 40.0]
    assert np.isnan(out[1]).all()


def test_table_values_are_read_only(table):
    with pytest.raises(ValueError):
        table.values[0, 0] = 99.0
    out = table.take(["female"], ["black"])
    out[0, 0] = 99.0
    assert table.values[0, 0] == 1.0


def test_table_shape_is_checked():
    with pytest.raises(ConfigurationError):
        CoefficientTable(name="bad", key_names=("sex",), keys=(("female",),), columns=("a", "b"), values=[[1.0]])


def test_repository_contents():
    repository = build_repository()
    assert ("Goff_2013", 5) in repository.pooled_cohort
    assert ("Goff_2013", 10) in repository.pooled_cohort
    assert ("Yadlowsky_2018", 10) in repository.pooled_cohort
    assert repository.has_prevent("base", 10, "ascvd")
    assert repository.has_prevent("base", 10, "cvd")
    assert repository.has_prevent("base", 30, "ascvd")
    assert repository.has_prevent("full", 10, "cvd")
    assert not repository.has_prevent("base", 10, "hf")
    assert not repository.has_prevent("acr", 10, "ascvd")


def test_bundled_full_model_uses_every_optional_term():
    cvd = build_repository().prevent_table("full", 10, "cvd")
    for term in ("sdi_decile_4_6", "sdi_decile_7_10", "missing_sdi", "ln_acr", "missing_acr",
                 "hba1c_x_diabetes", "hba1c_x_no_diabetes", "missing_hba1c"):
        assert (cvd.values[:, cvd.column(term)] != 0).all()


def test_directory_sheet_adds_endpoints_to_a_bundled_sheet(tmp_path):
    frame = pd.DataFrame({"variable": ["age", "const"], "women_stroke": [0.8, -4.0], "men_stroke": [0.7, -3.5]})
    frame.to_csv(tmp_path / "base_10.csv", index=False)
    repository = build_repository(str(tmp_path))
    assert repository.has_prevent("base", 10, "stroke")
    assert repository.has_prevent("base", 10, "cvd")


def test_repository_is_immutable():
    repository = build_repository()
    with pytest.raises(TypeError):
        repository.prevent[("acr", 10, "ascvd")] = None


def test_repository_lookup_of_unknown_key_is_a_contract_violation():
    repository = build_repository()
    with pytest.raises(CoefficientLookupError):
        repository.pooled_cohort_table("Yadlowsky_2018", 5)
    with pytest.raises(CoefficientLookupError):
        repository.prevent_table("full", 30, "cvd")


def test_prevent_sheet_missing_terms_default_to_zero():
    frame = pd.DataFrame({"variable": ["age", "const"], "women_stroke": [0.8, -4.0], "men_stroke": [0.7, -3.5]})
    tables = prevent_tables_from_frame(frame, "base", 10)
    assert list(tables) == [("base", 10, "stroke")]
    stroke = tables[("base", 10, "stroke")]
    assert stroke.columns == tuple(PREVENT_TERMS)
    assert stroke.values[0, stroke.column("age")] == 0.8
    assert stroke.values[1, stroke.column("const")] == -3.5
    assert stroke.values[:, stroke.column("hdl_c")].tolist() == [0.0, 0.0]


def test_prevent_sheet_rejects_unknown_terms():
    frame = pd.DataFrame({"variable": ["age", "ldl"], "women_cvd": [0.8, 0.1], "men_cvd": [0.7, 0.1]})
    with pytest.raises(ConfigurationError, match="unknown terms: ldl"):
        prevent_tables_from_frame(frame, "base", 10)


def test_prevent_sheet_requires_both_sexes():
    frame = pd.DataFrame({"variable": ["age"], "women_cvd": [0.8]})
    with pytest.raises(ConfigurationError, match="one sex only"):
        prevent_tables_from_frame(frame, "base", 10)


def test_directory_sheets_take_precedence(tmp_path):
    sheet = BASE_10.copy()
    sheet.loc[sheet["variable"] == "const", "women_cvd"] = -1.0
    sheet.to_csv(tmp_path / "base_10.csv", index=False)
    repository = build_repository(str(tmp_path))
    cvd = repository.prevent_table("base", 10, "cvd")
    assert cvd.values[0, cvd.column("const")] == -1.0


def test_missing_directory_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError, match="does not exist"):
        build_repository(str(tmp_path / "nowhere"))
