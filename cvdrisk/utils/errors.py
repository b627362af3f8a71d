# utils/errors.py

# -----------------------------
# Input errors (fatal, no partial result)
# -----------------------------

class RiskInputError(ValueError):
    """Base class for every user-facing error raised by the engine."""


class ConfigurationError(RiskInputError):
    """A category level map has the wrong shape, names or aliases."""


class TypeMismatchError(RiskInputError, TypeError):
    pass


class LengthMismatchError(RiskInputError):
    pass


class BoundsViolationError(RiskInputError):
    """A continuous input lies outside its recommended range."""

    def __init__(self, name, observed, bound, side):
        self.name = name
        self.observed = observed
        self.bound = bound
        self.side = side
        if side == "lower":
            message = f"min({name}) is {observed:g} but should be >= {bound:g}"
        else:
            message = f"max({name}) is {observed:g} but should be <= {bound:g}"
        super().__init__(message)


class InvalidCategoryError(RiskInputError):
    pass


class MissingRequiredVariableError(RiskInputError):

    def __init__(self, message, missing=()):
        self.missing = tuple(missing)
        super().__init__(message)


class UnsupportedEquationError(RiskInputError):
    pass


# -----------------------------
# Internal contract violations
# -----------------------------

class CoefficientLookupError(LookupError):
    """A validated equation descriptor has no coefficient table."""


# -----------------------------
# Warnings
# -----------------------------

class MissingDataWarning(UserWarning):
    pass
