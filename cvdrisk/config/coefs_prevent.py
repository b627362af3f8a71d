# config/coefs_prevent.py
import pandas as pd

# -----------------------------
# PREVENT term catalogue
# -----------------------------
# Every PREVENT sheet is expressed over this fixed set of terms; a term a model
# does not use has coefficient 0.
PREVENT_TERMS = [
    "age", "age_squared",
    "non_hdl_c", "hdl_c",
    "sbp_lt110", "sbp_gteq110",
    "diabetes", "current_smoking",
    "bmi_lt30", "bmi_gteq30",
    "egfr_lt60", "egfr_gteq60",
    "anti_htn_meds", "statin",
    "treated_sbp_gteq110", "treated_non_hdl_c",
    "age_x_non_hdl_c", "age_x_hdl_c", "age_x_sbp_gteq110", "age_x_diabetes",
    "age_x_current_smoking", "age_x_bmi_gteq30", "age_x_egfr_lt60",
    "sdi_decile_4_6", "sdi_decile_7_10", "missing_sdi",
    "ln_acr", "missing_acr",
    "hba1c_x_diabetes", "hba1c_x_no_diabetes", "missing_hba1c",
    "const",
]

# Sheet columns are <women|men>_<endpoint>
SEX_PREFIXES = {"women": "female", "men": "male"}


def _sheet(columns):
    """Build a sheet in the published layout: a variable column plus one column per sex/endpoint."""
    frame = pd.DataFrame(columns).reindex(PREVENT_TERMS).fillna(0.0)
    return frame.rename_axis("variable").reset_index()


# -----------------------------
# Base model, 10-year horizon
# -----------------------------
BASE_10 = _sheet({
    "women_cvd": {
        "age": 0.7939329, "non_hdl_c": 0.0305239, "hdl_c": -0.1606857,
        "sbp_lt110": -0.2394003, "sbp_gteq110": 0.360078,
        "diabetes": 0.8667604, "current_smoking": 0.5360739,
        "egfr_lt60": 0.6045917, "egfr_gteq60": 0.0433769,
        "anti_htn_meds": 0.3151672, "statin": -0.1477655,
        "treated_sbp_gteq110": -0.0663612, "treated_non_hdl_c": 0.1197879,
        "age_x_non_hdl_c": -0.0819715, "age_x_hdl_c": 0.0306769,
        "age_x_sbp_gteq110": -0.0946348, "age_x_diabetes": -0.27057,
        "age_x_current_smoking": -0.078715, "age_x_egfr_lt60": -0.1637806,
        "const": -3.307728,
    },
    "women_ascvd": {
        "age": 0.719883, "non_hdl_c": 0.1176967, "hdl_c": -0.151185,
        "sbp_lt110": -0.0835358, "sbp_gteq110": 0.3592852,
        "diabetes": 0.8348585, "current_smoking": 0.4831078,
        "egfr_lt60": 0.4864619, "egfr_gteq60": 0.0397779,
        "anti_htn_meds": 0.2265309, "statin": -0.0592374,
        "treated_sbp_gteq110": -0.0395762, "treated_non_hdl_c": 0.0844423,
        "age_x_non_hdl_c": -0.0567839, "age_x_hdl_c": 0.0325692,
        "age_x_sbp_gteq110": -0.1035985, "age_x_diabetes": -0.2417542,
        "age_x_current_smoking": -0.0791142, "age_x_egfr_lt60": -0.1671492,
        "const": -3.819975,
    },
    "men_cvd": {
        "age": 0.7688528, "non_hdl_c": 0.0736174, "hdl_c": -0.0954431,
        "sbp_lt110": -0.4347345, "sbp_gteq110": 0.3362658,
        "diabetes": 0.7692857, "current_smoking": 0.4386871,
        "egfr_lt60": 0.5378979, "egfr_gteq60": 0.0164827,
        "anti_htn_meds": 0.288879, "statin": -0.1337349,
        "treated_sbp_gteq110": -0.0475924, "treated_non_hdl_c": 0.150273,
        "age_x_non_hdl_c": -0.0517874, "age_x_hdl_c": 0.0191169,
        "age_x_sbp_gteq110": -0.1049477, "age_x_diabetes": -0.2251948,
        "age_x_current_smoking": -0.0895067, "age_x_egfr_lt60": -0.1543702,
        "const": -3.031168,
    },
    "men_ascvd": {
        "age": 0.7099847, "non_hdl_c": 0.1658663, "hdl_c": -0.1144285,
        "sbp_lt110": -0.2837212, "sbp_gteq110": 0.3239977,
        "diabetes": 0.7189597, "current_smoking": 0.3956973,
        "egfr_lt60": 0.3690075, "egfr_gteq60": 0.0203619,
        "anti_htn_meds": 0.2036522, "statin": -0.0865581,
        "treated_sbp_gteq110": -0.0322916, "treated_non_hdl_c": 0.114563,
        "age_x_non_hdl_c": -0.0300005, "age_x_hdl_c": 0.0232747,
        "age_x_sbp_gteq110": -0.0927024, "age_x_diabetes": -0.2018525,
        "age_x_current_smoking": -0.0970527, "age_x_egfr_lt60": -0.1217081,
        "const": -3.500655,
    },
})

# -----------------------------
# Base model, 30-year horizon
# -----------------------------
BASE_30 = _sheet({
    "women_ascvd": {
        "age": 0.4669202, "age_squared": -0.0893118,
        "non_hdl_c": 0.1256901, "hdl_c": -0.1542255,
        "sbp_lt110": -0.0018093, "sbp_gteq110": 0.322949,
        "diabetes": 0.6296707, "current_smoking": 0.268292,
        "egfr_lt60": 0.100106, "egfr_gteq60": 0.0499663,
        "anti_htn_meds": 0.1875292, "statin": 0.0152476,
        "treated_sbp_gteq110": -0.0276123, "treated_non_hdl_c": 0.0736147,
        "age_x_non_hdl_c": -0.0521962, "age_x_hdl_c": 0.0316918,
        "age_x_sbp_gteq110": -0.1046101, "age_x_diabetes": -0.2727793,
        "age_x_current_smoking": -0.1530907, "age_x_egfr_lt60": -0.1299149,
        "const": -1.974074,
    },
    "men_ascvd": {
        "age": 0.3994099, "age_squared": -0.0937484,
        "non_hdl_c": 0.1744643, "hdl_c": -0.120203,
        "sbp_lt110": -0.0665117, "sbp_gteq110": 0.2753037,
        "diabetes": 0.4790257, "current_smoking": 0.1782635,
        "egfr_lt60": -0.0218789, "egfr_gteq60": 0.0602553,
        "anti_htn_meds": 0.1421182, "statin": 0.0135996,
        "treated_sbp_gteq110": -0.0218265, "treated_non_hdl_c": 0.1013148,
        "age_x_non_hdl_c": -0.0312619, "age_x_hdl_c": 0.020673,
        "age_x_sbp_gteq110": -0.0920935, "age_x_diabetes": -0.2159947,
        "age_x_current_smoking": -0.1548811, "age_x_egfr_lt60": -0.0712547,
        "const": -1.736444,
    },
})

# -----------------------------
# Full model (SDI, ACR and HbA1c), 10-year horizon
# -----------------------------
FULL_10 = _sheet({
    "women_cvd": {
        "age": 0.7716794, "non_hdl_c": 0.0062109, "hdl_c": -0.1547756,
        "sbp_lt110": -0.1933123, "sbp_gteq110": 0.3071217,
        "diabetes": 0.496753, "current_smoking": 0.466605,
        "egfr_lt60": 0.4780697, "egfr_gteq60": 0.0529077,
        "anti_htn_meds": 0.3034892, "statin": -0.1556524,
        "treated_sbp_gteq110": -0.0667026, "treated_non_hdl_c": 0.1061825,
        "age_x_non_hdl_c": -0.0742271, "age_x_hdl_c": 0.0288245,
        "age_x_sbp_gteq110": -0.0875188, "age_x_diabetes": -0.2267102,
        "age_x_current_smoking": -0.0676125, "age_x_egfr_lt60": -0.1493231,
        "sdi_decile_4_6": 0.1361989, "sdi_decile_7_10": 0.2261596, "missing_sdi": 0.1804508,
        "ln_acr": 0.1645922, "missing_acr": 0.0198413,
        "hba1c_x_diabetes": 0.1298513, "hba1c_x_no_diabetes": 0.1412555, "missing_hba1c": 0.0053486,
        "const": -3.860385,
    },
    "men_cvd": {
        "age": 0.7847578, "non_hdl_c": 0.0534485, "hdl_c": -0.0911282,
        "sbp_lt110": -0.4921973, "sbp_gteq110": 0.2972415,
        "diabetes": 0.4527054, "current_smoking": 0.3726641,
        "egfr_lt60": 0.3886854, "egfr_gteq60": 0.0081661,
        "anti_htn_meds": 0.2508052, "statin": -0.1538484,
        "treated_sbp_gteq110": -0.0474695, "treated_non_hdl_c": 0.1415382,
        "age_x_non_hdl_c": -0.0436455, "age_x_hdl_c": 0.0199549,
        "age_x_sbp_gteq110": -0.1022686, "age_x_diabetes": -0.1762507,
        "age_x_current_smoking": -0.0715873, "age_x_egfr_lt60": -0.1428668,
        "sdi_decile_4_6": 0.0802431, "sdi_decile_7_10": 0.275073, "missing_sdi": 0.144759,
        "ln_acr": 0.1772853, "missing_acr": 0.1095674,
        "hba1c_x_diabetes": 0.1165698, "hba1c_x_no_diabetes": 0.1048297, "missing_hba1c": -0.0230072,
        "const": -3.631387,
    },
})

# (prevent_type, horizon) -> bundled sheet. Only endpoints checked against the
# published worked examples are bundled; other sheets and endpoint columns
# (acr, hba1c, sdi, 30-year full, hf, chd, stroke) are read from
# <prevent_type>_<horizon>.csv files in the configured coefficient directory.
PREVENT_SHEETS = {
    ("base", 10): BASE_10,
    ("base", 30): BASE_30,
    ("full", 10): FULL_10,
}
