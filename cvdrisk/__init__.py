"""
cvdrisk - cardiovascular risk equations

Pooled Cohort (Goff 2013), revised Pooled Cohort (Yadlowsky 2018) and
PREVENT (Khan 2023) risk of cardiovascular events from subject covariates.
"""
import logging

from cvdrisk.predict import (
    predict_risk,
    predict_risk_frame,
    predict_5yr_ascvd_risk,
    predict_10yr_ascvd_risk,
    predict_10yr_cvd_risk,
    predict_10yr_hf_risk,
    predict_10yr_chd_risk,
    predict_10yr_stroke_risk,
    predict_30yr_ascvd_risk,
    predict_30yr_cvd_risk,
    predict_30yr_hf_risk,
    predict_30yr_chd_risk,
    predict_30yr_stroke_risk,
)
from cvdrisk.utils.coefficients import CoefficientRepository, build_repository, get_repository
from cvdrisk.utils.equations import EquationDescriptor
from cvdrisk.utils.errors import (
    RiskInputError,
    ConfigurationError,
    TypeMismatchError,
    LengthMismatchError,
    BoundsViolationError,
    InvalidCategoryError,
    MissingRequiredVariableError,
    UnsupportedEquationError,
    CoefficientLookupError,
    MissingDataWarning,
)
from cvdrisk.utils.validators import broadcast_inputs

__version__ = "0.1.0"

__all__ = [
    "predict_risk",
    "predict_risk_frame",
    "predict_5yr_ascvd_risk",
    "predict_10yr_ascvd_risk",
    "predict_10yr_cvd_risk",
    "predict_10yr_hf_risk",
    "predict_10yr_chd_risk",
    "predict_10yr_stroke_risk",
    "predict_30yr_ascvd_risk",
    "predict_30yr_cvd_risk",
    "predict_30yr_hf_risk",
    "predict_30yr_chd_risk",
    "predict_30yr_stroke_risk",
    "broadcast_inputs",
    "CoefficientRepository",
    "build_repository",
    "get_repository",
    "EquationDescriptor",
    "RiskInputError",
    "ConfigurationError",
    "TypeMismatchError",
    "LengthMismatchError",
    "BoundsViolationError",
    "InvalidCategoryError",
    "MissingRequiredVariableError",
    "UnsupportedEquationError",
    "CoefficientLookupError",
    "MissingDataWarning",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
