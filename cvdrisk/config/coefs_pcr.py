# config/coefs_pcr.py
import pandas as pd

# -----------------------------
# Goff 2013 Pooled Cohort equations
# -----------------------------
# One row per (sex, race) subgroup. base_surv_<h> is the baseline survival at
# h years; mean is the subgroup mean of the linear predictor.
GOFF_2013 = pd.DataFrame({
    "sex": ["female", "female", "male", "male"],
    "race": ["black", "white", "black", "white"],
    "base_surv_10": [0.95334, 0.96652, 0.89536, 0.91436],
    "base_surv_5": [0.98194, 0.98898, 0.95726, 0.96254],
    "mean": [86.6081, -29.1817, 19.5425, 61.1816],
    "ln_age": [17.1141, -29.799, 2.469, 12.344],
    "ln_age_squared": [0.0, 4.884, 0.0, 0.0],
    "ln_chol_total": [0.9396, 13.54, 0.302, 11.853],
    "ln_age_x_ln_chol_total": [0.0, -3.114, 0.0, -2.664],
    "ln_chol_hdl": [-18.9196, -13.578, -0.307, -7.99],
    "ln_age_x_ln_chol_hdl": [4.4748, 3.149, 0.0, 1.769],
    "ln_treated_sbp": [29.2907, 2.019, 1.916, 1.797],
    "ln_age_x_ln_treated_sbp": [-6.4321, 0.0, 0.0, 0.0],
    "ln_untreated_sbp": [27.8197, 1.957, 1.809, 1.764],
    "ln_age_x_ln_untreated_sbp": [-6.0873, 0.0, 0.0, 0.0],
    "smoke_current": [0.6908, 7.574, 0.549, 7.837],
    "ln_age_x_smoke_current": [0.0, -1.665, 0.0, -1.795],
    "diabetes": [0.8738, 0.661, 0.645, 0.658],
})

GOFF_2013_TERMS = [
    "ln_age", "ln_age_squared",
    "ln_chol_total", "ln_age_x_ln_chol_total",
    "ln_chol_hdl", "ln_age_x_ln_chol_hdl",
    "ln_treated_sbp", "ln_age_x_ln_treated_sbp",
    "ln_untreated_sbp", "ln_age_x_ln_untreated_sbp",
    "smoke_current", "ln_age_x_smoke_current",
    "diabetes",
]

# -----------------------------
# Yadlowsky 2018 revised Pooled Cohort equations
# -----------------------------
# One row per sex; race enters through the black indicator and its interactions.
YADLOWSKY_2018 = pd.DataFrame({
    "sex": ["female", "male"],
    "intercept": [-12.823110, -11.679980],
    "age_years": [0.106501, 0.064200],
    "black": [0.432440, 0.482835],
    "bp_sys_squared": [0.000056, -0.000061],
    "bp_sys_mmhg": [0.017666, 0.038950],
    "bp_meds": [0.731678, 2.055533],
    "diabetes": [0.943970, 0.842209],
    "smoke_current": [1.009790, 0.895589],
    "chol_ratio": [0.151318, 0.193307],
    "age_x_black": [-0.008580, 0.0],
    "bp_sys_x_bp_meds": [-0.003647, -0.014207],
    "bp_sys_x_black": [0.006208, 0.011609],
    "bp_meds_x_black": [0.152968, -0.119460],
    "age_x_bp_sys": [-0.000153, 0.000025],
    "black_x_diabetes": [0.115232, -0.077214],
    "black_x_smoke_current": [-0.092231, -0.226771],
    "black_x_chol_ratio": [0.070498, -0.117749],
    "black_x_bp_sys_x_bp_meds": [-0.000173, 0.004190],
    "black_x_age_x_bp_sys": [-0.000094, -0.000199],
})

YADLOWSKY_2018_TERMS = [
    "age_years", "black", "bp_sys_squared", "bp_sys_mmhg", "bp_meds",
    "diabetes", "smoke_current", "chol_ratio", "age_x_black",
    "bp_sys_x_bp_meds", "bp_sys_x_black", "bp_meds_x_black", "age_x_bp_sys",
    "black_x_diabetes", "black_x_smoke_current", "black_x_chol_ratio",
    "black_x_bp_sys_x_bp_meds", "black_x_age_x_bp_sys",
]
