# modules/_01_pooled_cohort.py
import logging

import numpy as np

from cvdrisk.utils.normalize import indicator
from cvdrisk.utils.risk_model import cox_survival, linear_predictor, logistic

logger = logging.getLogger(__name__)

# -----------------------------
# Derived terms
# -----------------------------

def goff_terms(age_years, chol_total_mgdl, chol_hdl_mgdl, bp_sys_mmhg, bp_meds, smoke_current, diabetes):
    """Log-scale terms of the 2013 Pooled Cohort equations.

    Continuous inputs are float vectors; bp_meds, smoke_current and diabetes
    are 0/1 indicators with NaN where missing.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        ln_age = np.log(age_years)
        ln_tc = np.log(chol_total_mgdl)
        ln_hdl = np.log(chol_hdl_mgdl)
        ln_sbp = np.log(bp_sys_mmhg)
    ln_treated_sbp = ln_sbp * bp_meds
    ln_untreated_sbp = ln_sbp * (1 - bp_meds)
    return {
        "ln_age": ln_age,
        "ln_age_squared": ln_age ** 2,
        "ln_chol_total": ln_tc,
        "ln_age_x_ln_chol_total": ln_age * ln_tc,
        "ln_chol_hdl": ln_hdl,
        "ln_age_x_ln_chol_hdl": ln_age * ln_hdl,
        "ln_treated_sbp": ln_treated_sbp,
        "ln_age_x_ln_treated_sbp": ln_age * ln_treated_sbp,
        "ln_untreated_sbp": ln_untreated_sbp,
        "ln_age_x_ln_untreated_sbp": ln_age * ln_untreated_sbp,
        "smoke_current": smoke_current,
        "ln_age_x_smoke_current": ln_age * smoke_current,
        "diabetes": diabetes,
    }


def yadlowsky_terms(age_years, chol_total_mgdl, chol_hdl_mgdl, bp_sys_mmhg, bp_meds, smoke_current, diabetes, black):
    """Raw-scale terms of the revised Pooled Cohort equations."""
    chol_ratio = chol_total_mgdl / chol_hdl_mgdl
    return {
        "age_years": age_years,
        "black": black,
        "bp_sys_squared": bp_sys_mmhg ** 2,
        "bp_sys_mmhg": bp_sys_mmhg,
        "bp_meds": bp_meds,
        "diabetes": diabetes,
        "smoke_current": smoke_current,
        "chol_ratio": chol_ratio,
        "age_x_black": age_years * black,
        "bp_sys_x_bp_meds": bp_sys_mmhg * bp_meds,
        "bp_sys_x_black": bp_sys_mmhg * black,
        "bp_meds_x_black": bp_meds * black,
        "age_x_bp_sys": age_years * bp_sys_mmhg,
        "black_x_diabetes": black * diabetes,
        "black_x_smoke_current": black * smoke_current,
        "black_x_chol_ratio": black * chol_ratio,
        "black_x_bp_sys_x_bp_meds": black * bp_sys_mmhg * bp_meds,
        "black_x_age_x_bp_sys": black * age_years * bp_sys_mmhg,
    }

# -----------------------------
# Risk
# -----------------------------

def run(covariates, descriptor, repository):
    """Pooled Cohort risk for normalized covariates, one value per row in input order."""
    table = repository.pooled_cohort_table(descriptor.equation_version, descriptor.horizon)
    logger.debug("%s %d-year ascvd risk for %d rows", descriptor.equation_version,
                 descriptor.horizon, len(covariates["age_years"]))

    shared = dict(
        age_years=covariates["age_years"],
        chol_total_mgdl=covariates["chol_total_mgdl"],
        chol_hdl_mgdl=covariates["chol_hdl_mgdl"],
        bp_sys_mmhg=covariates["bp_sys_mmhg"],
        bp_meds=indicator(covariates["bp_meds"]),
        smoke_current=indicator(covariates["smoke_current"]),
        diabetes=indicator(covariates["diabetes"]),
    )

    if descriptor.equation_version == "Goff_2013":
        coefs = table.take(covariates["sex"], covariates["race"])
        lp = linear_predictor(goff_terms(**shared), coefs, table.columns)
        return cox_survival(lp, coefs[:, table.column("base_surv")], coefs[:, table.column("mean")])

    black = indicator(covariates["race"], "black")
    coefs = table.take(covariates["sex"])
    lp = coefs[:, table.column("intercept")] + linear_predictor(yadlowsky_terms(black=black, **shared), coefs, table.columns)
    return logistic(lp)
