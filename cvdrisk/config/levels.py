# config/levels.py

# -----------------------------
# Canonical category names
# -----------------------------
# Each categorical argument is normalized to exactly these names before use.
CANONICAL_LEVELS = {
    "race": ("black", "white"),
    "sex": ("female", "male"),
    "smoke_current": ("no", "yes"),
    "bp_meds": ("no", "yes"),
    "statin_meds": ("no", "yes"),
    "diabetes": ("no", "yes"),
}

# -----------------------------
# Default alias maps
# -----------------------------
# canonical name -> accepted raw values (matched case-insensitively)
DEFAULT_LEVELS = {
    "race": {"black": ("black",), "white": ("white",)},
    "sex": {"female": ("female",), "male": ("male",)},
    "smoke_current": {"no": ("no",), "yes": ("yes",)},
    "bp_meds": {"no": ("no",), "yes": ("yes",)},
    "statin_meds": {"no": ("no",), "yes": ("yes",)},
    "diabetes": {"no": ("no",), "yes": ("yes",)},
}
