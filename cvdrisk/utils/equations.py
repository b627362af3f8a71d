# utils/equations.py
from dataclasses import dataclass
from typing import Optional

from cvdrisk.config.equations import ENDPOINTS, EQUATION_VERSIONS, PREVENT_TYPES, REQUIRED_VARIABLES
from cvdrisk.utils.errors import MissingRequiredVariableError, UnsupportedEquationError
from cvdrisk.utils.validators import collapse_values

FAMILY_LABELS = {"pooled_cohort": "Pooled Cohort equations", "prevent": "PREVENT equations"}


@dataclass(frozen=True)
class EquationDescriptor:
    pred_type: str
    equation_version: str
    horizon: int
    prevent_type: Optional[str] = None

    @property
    def family(self):
        return EQUATION_VERSIONS[self.equation_version]["family"]

    @property
    def optional_arguments(self):
        """Raw arguments the PREVENT variant adds (empty outside PREVENT)."""
        if self.prevent_type is None:
            return ()
        return PREVENT_TYPES[self.prevent_type]


def _option_error(name, value, options):
    return UnsupportedEquationError(
        f"{name} should be one of <{collapse_values(list(options))}>\nbut instead is <{value}>"
    )


def resolve_equation(pred_type, horizon, equation_version, prevent_type, repository):
    """Validate the requested equation and build its descriptor."""
    if equation_version not in EQUATION_VERSIONS:
        raise _option_error("equation_version", equation_version, EQUATION_VERSIONS)
    if pred_type not in ENDPOINTS:
        raise _option_error("pred_type", pred_type, ENDPOINTS)

    version = EQUATION_VERSIONS[equation_version]
    if isinstance(horizon, bool) or horizon not in version["horizons"]:
        years = collapse_values([f"{h}-year" for h in version["horizons"]])
        raise UnsupportedEquationError(f"only {years} risk is available for {equation_version}")
    horizon = int(horizon)

    if version["family"] == "pooled_cohort":
        if pred_type not in version["endpoints"]:
            raise UnsupportedEquationError(
                f"{equation_version} predicts {collapse_values(version['endpoints'])} risk only; "
                f"use Khan_2023 for {pred_type} risk"
            )
        return EquationDescriptor(pred_type, equation_version, horizon)

    if prevent_type not in PREVENT_TYPES:
        raise _option_error("prevent_type", prevent_type, PREVENT_TYPES)
    if not repository.has_prevent(prevent_type, horizon, pred_type):
        raise UnsupportedEquationError(
            f"no PREVENT coefficients loaded for prevent_type '{prevent_type}' "
            f"({horizon}-year {pred_type} risk); add {prevent_type}_{horizon}.csv with "
            f"women_{pred_type} and men_{pred_type} columns to the directory named by CVDRISK_COEFFICIENT_DIR"
        )
    return EquationDescriptor(pred_type, equation_version, horizon, prevent_type)


def check_required(descriptor, supplied):
    """Raise if an argument the equation needs was not supplied at all.

    Every missing name is reported together.
    """
    missing = [name for name in REQUIRED_VARIABLES[descriptor.family] if supplied.get(name) is None]
    label = FAMILY_LABELS[descriptor.family]
    if not missing:
        missing = [name for name in descriptor.optional_arguments if supplied.get(name) is None]
        label = f"prevent_type '{descriptor.prevent_type}'"
    if missing:
        noun = "variables" if len(missing) > 1 else "variable"
        raise MissingRequiredVariableError(
            f"missing required {noun} for {label}: {', '.join(missing)}", missing
        )
