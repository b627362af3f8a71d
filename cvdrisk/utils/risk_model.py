# utils/risk_model.py
import numpy as np
from scipy.special import expit

# -----------------------------
# Linear predictor
# -----------------------------

def linear_predictor(terms, coefficients, columns):
    """Sum of coefficient x term over the given terms.

    terms maps term name -> per-row vector; coefficients is the per-row matrix
    from CoefficientTable.take and columns names its columns. Missing values in
    either operand leave the row missing.
    """
    lp = np.zeros(coefficients.shape[0])
    for name, values in terms.items():
        lp = lp + coefficients[:, columns.index(name)] * values
    return lp

# -----------------------------
# Link functions
# -----------------------------

def logistic(lp):
    return expit(lp)


def cox_survival(lp, base_surv, mean):
    """Event probability 1 - S0^exp(lp - mean) from baseline survival S0."""
    return 1.0 - np.power(base_surv, np.exp(lp - mean))
