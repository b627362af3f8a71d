# predict.py
import logging

import numpy as np
import pandas as pd

from cvdrisk.config.boundaries import boundaries_for
from cvdrisk.config.equations import DEFAULT_EQUATION_VERSION, DEFAULT_PREVENT_TYPE
from cvdrisk.config.levels import CANONICAL_LEVELS, DEFAULT_LEVELS
from cvdrisk.utils.coefficients import get_repository
from cvdrisk.utils.equations import check_required, resolve_equation
from cvdrisk.utils.errors import MissingRequiredVariableError
from cvdrisk.utils.normalize import normalize_categories, validate_levels
from cvdrisk.utils.validators import (
    as_numeric,
    as_vector,
    check_bounds,
    check_category,
    check_equal_lengths,
    check_length,
    check_missing,
    check_type,
)

logger = logging.getLogger(__name__)

# -----------------------------
# Covariates per equation family
# -----------------------------
CORE_VARIABLES = (
    "age_years", "sex", "smoke_current", "chol_total_mgdl", "chol_hdl_mgdl",
    "bp_sys_mmhg", "bp_meds", "diabetes",
)
FAMILY_VARIABLES = {
    "pooled_cohort": CORE_VARIABLES + ("race",),
    "prevent": CORE_VARIABLES + ("statin_meds", "bmi", "egfr_mlminm2"),
}
COVARIATE_ARGUMENTS = CORE_VARIABLES + ("race", "statin_meds", "bmi", "egfr_mlminm2", "acr", "hba1c", "sdi")


def _check_option(name, value, kind):
    """Check a single-valued option and return it as a scalar."""
    check_type(name, value, kind)
    check_length(name, value, 1)
    return as_vector(value)[0]


def _prepare(descriptor, supplied, levels, override_boundary_errors):
    """Validate and normalize the covariates an equation uses."""
    required = FAMILY_VARIABLES[descriptor.family]
    used = required + descriptor.optional_arguments

    for name in used:
        if name in CANONICAL_LEVELS:
            check_type(name, supplied[name], ("character", "numeric", "logical"))
        else:
            check_type(name, supplied[name], "numeric")
    check_equal_lengths(**{name: supplied[name] for name in used})

    covariates = {}
    for name in used:
        if name in CANONICAL_LEVELS:
            level_map = levels.get(name)
            if level_map is None:
                level_map = DEFAULT_LEVELS[name]
            level_map = validate_levels(name, level_map, CANONICAL_LEVELS[name])
            values = normalize_categories(supplied[name], level_map)
            check_category(name, values, CANONICAL_LEVELS[name])
        else:
            values = as_numeric(supplied[name])
        covariates[name] = values

    if not override_boundary_errors:
        for name, (lower, upper) in boundaries_for(descriptor.equation_version, descriptor.horizon).items():
            if name in covariates:
                check_bounds(name, covariates[name], lower, upper)

    check_missing({name: covariates[name] for name in required}, stacklevel=3)
    return covariates


def _run_module(covariates, descriptor, repository):
    if descriptor.family == "pooled_cohort":
        from cvdrisk.modules import _01_pooled_cohort as mod
    else:
        from cvdrisk.modules import _02_prevent as mod
    return mod.run(covariates, descriptor, repository)

# -----------------------------
# Entry points
# -----------------------------

def predict_risk(pred_type, horizon, age_years, sex, smoke_current, chol_total_mgdl, chol_hdl_mgdl,
                 bp_sys_mmhg, bp_meds, diabetes, race=None, statin_meds=None, bmi=None,
                 egfr_mlminm2=None, acr=None, hba1c=None, sdi=None,
                 equation_version=DEFAULT_EQUATION_VERSION, prevent_type=DEFAULT_PREVENT_TYPE,
                 override_boundary_errors=False, race_levels=None, sex_levels=None,
                 smoke_current_levels=None, bp_meds_levels=None, statin_meds_levels=None,
                 diabetes_levels=None, repository=None):
    """Predicted probability of a cardiovascular event within `horizon` years.

    Covariates are parallel vectors of equal length (see broadcast_inputs for
    expanding length-1 values). Each *_levels argument maps the canonical
    categories (e.g. female/male) to the raw values that stand for them.
    Returns a float array with one probability per row, in input order; rows
    missing a required covariate are NaN and reported in a MissingDataWarning.
    Missing acr, hba1c or sdi values are scored through the PREVENT
    missing-indicator terms instead.
    """
    pred_type = _check_option("pred_type", pred_type, "character")
    horizon = _check_option("horizon", horizon, "numeric")
    equation_version = _check_option("equation_version", equation_version, "character")
    override_boundary_errors = _check_option("override_boundary_errors", override_boundary_errors, "logical")

    repository = repository or get_repository()
    if equation_version == "Khan_2023":
        prevent_type = _check_option("prevent_type", prevent_type, "character")
    descriptor = resolve_equation(pred_type, horizon, equation_version, prevent_type, repository)

    supplied = dict(
        age_years=age_years, sex=sex, race=race, smoke_current=smoke_current,
        chol_total_mgdl=chol_total_mgdl, chol_hdl_mgdl=chol_hdl_mgdl, bp_sys_mmhg=bp_sys_mmhg,
        bp_meds=bp_meds, statin_meds=statin_meds, diabetes=diabetes, bmi=bmi,
        egfr_mlminm2=egfr_mlminm2, acr=acr, hba1c=hba1c, sdi=sdi,
    )
    check_required(descriptor, supplied)

    levels = dict(
        race=race_levels, sex=sex_levels, smoke_current=smoke_current_levels,
        bp_meds=bp_meds_levels, statin_meds=statin_meds_levels, diabetes=diabetes_levels,
    )
    covariates = _prepare(descriptor, supplied, levels, bool(override_boundary_errors))
    logger.debug("Dispatching %s", descriptor)
    return _run_module(covariates, descriptor, repository)


def predict_5yr_ascvd_risk(*args, **kwargs):
    return predict_risk("ascvd", 5, *args, **kwargs)


def predict_10yr_ascvd_risk(*args, **kwargs):
    return predict_risk("ascvd", 10, *args, **kwargs)


def predict_10yr_cvd_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("cvd", 10, *args, **kwargs)


def predict_10yr_hf_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("hf", 10, *args, **kwargs)


def predict_10yr_chd_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("chd", 10, *args, **kwargs)


def predict_10yr_stroke_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("stroke", 10, *args, **kwargs)


def predict_30yr_ascvd_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("ascvd", 30, *args, **kwargs)


def predict_30yr_cvd_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("cvd", 30, *args, **kwargs)


def predict_30yr_hf_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("hf", 30, *args, **kwargs)


def predict_30yr_chd_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("chd", 30, *args, **kwargs)


def predict_30yr_stroke_risk(*args, **kwargs):
    kwargs.setdefault("equation_version", "Khan_2023")
    return predict_risk("stroke", 30, *args, **kwargs)


def predict_risk_frame(frame: pd.DataFrame, pred_type, horizon, columns=None, **options):
    """Score every row of a DataFrame; returns a Series aligned to frame.index.

    columns maps argument names to frame column names where they differ;
    remaining options are passed to predict_risk.
    """
    names = {name: name for name in COVARIATE_ARGUMENTS}
    names.update(columns or {})
    covariates = {name: frame[column] for name, column in names.items() if column in frame.columns}

    absent = [name for name in CORE_VARIABLES if name not in covariates]
    if absent:
        noun = "columns" if len(absent) > 1 else "column"
        raise MissingRequiredVariableError(f"missing required {noun}: {', '.join(names[n] for n in absent)}", absent)

    risk = predict_risk(pred_type, horizon, **covariates, **options)
    return pd.Series(np.asarray(risk, dtype=float), index=frame.index, name=f"{pred_type}_{horizon}yr_risk")
