# config/equations.py

# Endpoints mapping: name -> metadata (description)
ENDPOINTS = {
    "ascvd": {"description": "Atherosclerotic cardiovascular disease (fatal/non-fatal MI, CHD death, stroke)"},
    "cvd": {"description": "Total cardiovascular disease (ASCVD or heart failure)"},
    "hf": {"description": "Heart failure"},
    "chd": {"description": "Coronary heart disease"},
    "stroke": {"description": "Stroke"},
}

# Equation versions: name -> metadata (family, horizons in years, endpoints with bundled coefficients)
EQUATION_VERSIONS = {
    "Goff_2013": {
        "family": "pooled_cohort",
        "horizons": (5, 10),
        "endpoints": ("ascvd",),
        "description": "2013 ACC/AHA Pooled Cohort equations",
    },
    "Yadlowsky_2018": {
        "family": "pooled_cohort",
        "horizons": (10,),
        "endpoints": ("ascvd",),
        "description": "Revised Pooled Cohort equations (logistic form)",
    },
    "Khan_2023": {
        "family": "prevent",
        "horizons": (10, 30),
        "endpoints": ("ascvd", "cvd", "hf", "chd", "stroke"),
        "description": "AHA PREVENT equations",
    },
}

# PREVENT variants: name -> optional covariate blocks they switch on
PREVENT_TYPES = {
    "base": (),
    "acr": ("acr",),
    "hba1c": ("hba1c",),
    "sdi": ("sdi",),
    "full": ("sdi", "acr", "hba1c"),
}

DEFAULT_EQUATION_VERSION = "Goff_2013"
DEFAULT_PREVENT_TYPE = "base"

# Arguments each family cannot run without
REQUIRED_VARIABLES = {
    "pooled_cohort": ("race",),
    "prevent": ("statin_meds", "egfr_mlminm2", "bmi"),
}
