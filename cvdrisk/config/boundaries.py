# config/boundaries.py

# -----------------------------
# Recommended input ranges
# -----------------------------
# equation_version -> covariate -> (lower, upper), inclusive.
# Values outside these ranges raise unless override_boundary_errors=True.
_POOLED_COHORT = {
    "age_years": (40, 80),
    "chol_total_mgdl": (130, 320),
    "chol_hdl_mgdl": (20, 100),
    "bp_sys_mmhg": (90, 200),
}

BOUNDARIES = {
    "Goff_2013": dict(_POOLED_COHORT),
    "Yadlowsky_2018": dict(_POOLED_COHORT),
    "Khan_2023": {
        "age_years": (30, 79),
        "chol_total_mgdl": (130, 320),
        "chol_hdl_mgdl": (20, 100),
        "bp_sys_mmhg": (90, 180),
        "bmi": (18.5, 39.9),
        "egfr_mlminm2": (15, 140),
        "acr": (0.1, 25000),
        "hba1c": (4.5, 15),
        "sdi": (1, 10),
    },
}

# (equation_version, horizon) -> covariate -> (lower, upper); replaces the entry above
HORIZON_BOUNDARIES = {
    ("Khan_2023", 30): {"age_years": (30, 59)},
}


def boundaries_for(equation_version, horizon):
    bounds = dict(BOUNDARIES[equation_version])
    bounds.update(HORIZON_BOUNDARIES.get((equation_version, horizon), {}))
    return bounds
