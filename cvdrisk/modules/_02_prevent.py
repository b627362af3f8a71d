# modules/_02_prevent.py
import logging
from collections import namedtuple

import numpy as np

from cvdrisk.config.equations import PREVENT_TYPES
from cvdrisk.config.settings import get_settings
from cvdrisk.utils.normalize import indicator
from cvdrisk.utils.risk_model import linear_predictor, logistic

logger = logging.getLogger(__name__)

MMOL_PER_MGDL = 0.02586

# -----------------------------
# Base terms
# -----------------------------

def base_terms(age_years, chol_total_mgdl, chol_hdl_mgdl, bp_sys_mmhg, bp_meds, statin_meds,
               smoke_current, diabetes, bmi, egfr_mlminm2):
    """Piecewise-linear PREVENT terms shared by every variant.

    Categorical inputs are 0/1 indicators with NaN where missing.
    """
    age = (age_years - 55) / 10
    non_hdl = (chol_total_mgdl - chol_hdl_mgdl) * MMOL_PER_MGDL - 3.5
    hdl = (chol_hdl_mgdl * MMOL_PER_MGDL - 1.3) / 0.3
    sbp_lt110 = (np.minimum(bp_sys_mmhg, 110) - 110) / 20
    sbp_gteq110 = (np.maximum(bp_sys_mmhg, 110) - 130) / 20
    bmi_lt30 = (np.minimum(bmi, 30) - 25) / 5
    bmi_gteq30 = (np.maximum(bmi, 30) - 30) / 5
    egfr_lt60 = (np.minimum(egfr_mlminm2, 60) - 60) / -15
    egfr_gteq60 = (np.maximum(egfr_mlminm2, 60) - 90) / -15
    return {
        "age": age,
        "age_squared": age ** 2,
        "non_hdl_c": non_hdl,
        "hdl_c": hdl,
        "sbp_lt110": sbp_lt110,
        "sbp_gteq110": sbp_gteq110,
        "diabetes": diabetes,
        "current_smoking": smoke_current,
        "bmi_lt30": bmi_lt30,
        "bmi_gteq30": bmi_gteq30,
        "egfr_lt60": egfr_lt60,
        "egfr_gteq60": egfr_gteq60,
        "anti_htn_meds": bp_meds,
        "statin": statin_meds,
        "treated_sbp_gteq110": sbp_gteq110 * bp_meds,
        "treated_non_hdl_c": non_hdl * statin_meds,
        "age_x_non_hdl_c": age * non_hdl,
        "age_x_hdl_c": age * hdl,
        "age_x_sbp_gteq110": age * sbp_gteq110,
        "age_x_diabetes": age * diabetes,
        "age_x_current_smoking": age * smoke_current,
        "age_x_bmi_gteq30": age * bmi_gteq30,
        "age_x_egfr_lt60": age * egfr_lt60,
    }

# -----------------------------
# Optional covariate blocks
# -----------------------------

BlockContext = namedtuple("BlockContext", ["diabetes", "sex", "pred_type", "impute_female_sdi"])


class OptionalBlock:
    """An optional PREVENT covariate with its own missing-value indicator.

    Rows where the covariate is missing get zero for its derived terms and 1
    for the indicator, so they are scored with the table's missing coefficient
    instead of becoming NaN.
    """
    argument = None
    missing_term = None

    def present_terms(self, values, context):
        raise NotImplementedError

    def fill_missing(self, values, context):
        return values

    def evaluate(self, values, context):
        values = self.fill_missing(values, context)
        missing = np.isnan(values)
        terms = {
            name: np.where(missing, 0.0, term)
            for name, term in self.present_terms(values, context).items()
        }
        terms[self.missing_term] = missing.astype(float)
        return terms


class AcrBlock(OptionalBlock):
    argument = "acr"
    missing_term = "missing_acr"

    def present_terms(self, acr, context):
        with np.errstate(divide="ignore", invalid="ignore"):
            return {"ln_acr": np.log(acr)}


class Hba1cBlock(OptionalBlock):
    argument = "hba1c"
    missing_term = "missing_hba1c"

    def present_terms(self, hba1c, context):
        centred = hba1c - 5.3
        return {
            "hba1c_x_diabetes": centred * context.diabetes,
            "hba1c_x_no_diabetes": centred * (1 - context.diabetes),
        }


class SdiBlock(OptionalBlock):
    argument = "sdi"
    missing_term = "missing_sdi"

    def fill_missing(self, sdi, context):
        # ASCVD model: women without an SDI are scored as decile 1
        if context.pred_type == "ascvd" and context.impute_female_sdi:
            return np.where(np.isnan(sdi) & (context.sex == "female"), 1.0, sdi)
        return sdi

    def present_terms(self, sdi, context):
        return {
            "sdi_decile_4_6": np.isin(sdi, (4, 5, 6)).astype(float),
            "sdi_decile_7_10": (sdi >= 7).astype(float),
        }


BLOCKS = {block.argument: block for block in (AcrBlock(), Hba1cBlock(), SdiBlock())}

# prevent_type -> blocks it switches on
VARIANTS = {
    prevent_type: tuple(BLOCKS[argument] for argument in arguments)
    for prevent_type, arguments in PREVENT_TYPES.items()
}

# -----------------------------
# Risk
# -----------------------------

def run(covariates, descriptor, repository):
    """PREVENT risk for normalized covariates, one value per row in input order."""
    table = repository.prevent_table(descriptor.prevent_type, descriptor.horizon, descriptor.pred_type)
    blocks = VARIANTS[descriptor.prevent_type]
    logger.debug("PREVENT %s %d-year %s risk for %d rows", descriptor.prevent_type,
                 descriptor.horizon, descriptor.pred_type, len(covariates["age_years"]))

    diabetes = indicator(covariates["diabetes"])
    terms = base_terms(
        age_years=covariates["age_years"],
        chol_total_mgdl=covariates["chol_total_mgdl"],
        chol_hdl_mgdl=covariates["chol_hdl_mgdl"],
        bp_sys_mmhg=covariates["bp_sys_mmhg"],
        bp_meds=indicator(covariates["bp_meds"]),
        statin_meds=indicator(covariates["statin_meds"]),
        smoke_current=indicator(covariates["smoke_current"]),
        diabetes=diabetes,
        bmi=covariates["bmi"],
        egfr_mlminm2=covariates["egfr_mlminm2"],
    )

    context = BlockContext(
        diabetes=diabetes,
        sex=covariates["sex"],
        pred_type=descriptor.pred_type,
        impute_female_sdi=get_settings().impute_missing_sdi_for_female_ascvd,
    )
    for block in blocks:
        terms.update(block.evaluate(covariates[block.argument], context))

    coefs = table.take(covariates["sex"])
    lp = coefs[:, table.column("const")] + linear_predictor(terms, coefs, table.columns)
    return logistic(lp)
