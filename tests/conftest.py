import numpy as np
import pytest

from cvdrisk.config.coefs_prevent import BASE_10
from cvdrisk.utils.coefficients import build_repository

# Synthetic coefficients for the optional PREVENT blocks, used only to check
# how the blocks are wired; the base terms are the published base model.
OPTIONAL_COEFFICIENTS = {
    "ln_acr": 0.15,
    "missing_acr": 0.02,
    "hba1c_x_diabetes": 0.13,
    "hba1c_x_no_diabetes": 0.14,
    "missing_hba1c": -0.01,
    "sdi_decile_4_6": 0.1,
    "sdi_decile_7_10": 0.2,
    "missing_sdi": 0.15,
}

OPTIONAL_SHEET_TERMS = {
    "acr": ("ln_acr", "missing_acr"),
    "hba1c": ("hba1c_x_diabetes", "hba1c_x_no_diabetes", "missing_hba1c"),
    "sdi": ("sdi_decile_4_6", "sdi_decile_7_10", "missing_sdi"),
    "full": tuple(OPTIONAL_COEFFICIENTS),
}


@pytest.fixture
def pcr_subjects():
    """Four subgroups sharing the covariates of the published Pooled Cohort examples."""
    return dict(
        age_years=[55, 55, 55, 55],
        sex=["female", "female", "male", "male"],
        race=["black", "white", "black", "white"],
        smoke_current=["no", "no", "no", "no"],
        chol_total_mgdl=[213, 213, 213, 213],
        chol_hdl_mgdl=[50, 50, 50, 50],
        bp_sys_mmhg=[120, 120, 120, 120],
        bp_meds=["no", "no", "no", "no"],
        diabetes=["no", "no", "no", "no"],
    )


@pytest.fixture
def prevent_subjects():
    """A woman and a man with the covariates of the published PREVENT example."""
    return dict(
        age_years=np.array([50.0, 50.0]),
        sex=["female", "male"],
        smoke_current=["no", "no"],
        chol_total_mgdl=[200, 200],
        chol_hdl_mgdl=[45, 45],
        bp_sys_mmhg=[160, 160],
        bp_meds=["yes", "yes"],
        statin_meds=["no", "no"],
        diabetes=["yes", "yes"],
        bmi=[35, 35],
        egfr_mlminm2=[90, 90],
    )


@pytest.fixture
def optional_repository(tmp_path):
    """Repository with acr, hba1c, sdi and full 10-year sheets loaded from CSV."""
    for prevent_type, terms in OPTIONAL_SHEET_TERMS.items():
        sheet = BASE_10.copy()
        for term in terms:
            sheet.loc[sheet["variable"] == term, sheet.columns[1:]] = OPTIONAL_COEFFICIENTS[term]
        sheet.to_csv(tmp_path / f"{prevent_type}_10.csv", index=False)
    return build_repository(str(tmp_path))
