# utils/coefficients.py
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

import numpy as np
import pandas as pd

from cvdrisk.config.coefs_pcr import GOFF_2013, GOFF_2013_TERMS, YADLOWSKY_2018, YADLOWSKY_2018_TERMS
from cvdrisk.config.coefs_prevent import PREVENT_SHEETS, PREVENT_TERMS, SEX_PREFIXES
from cvdrisk.config.equations import ENDPOINTS, EQUATION_VERSIONS, PREVENT_TYPES
from cvdrisk.config.settings import get_settings
from cvdrisk.utils.errors import CoefficientLookupError, ConfigurationError

logger = logging.getLogger(__name__)

# -----------------------------
# Coefficient tables
# -----------------------------

@dataclass(frozen=True, eq=False)
class CoefficientTable:
    """Read-only coefficients for one equation, one row per subgroup key."""
    name: str
    key_names: tuple
    keys: tuple
    columns: tuple
    values: np.ndarray

    def __post_init__(self):
        values = np.array(self.values, dtype=float)
        if values.shape != (len(self.keys), len(self.columns)):
            raise ConfigurationError(
                f"{self.name}: expected {len(self.keys)} x {len(self.columns)} coefficients, got {values.shape}"
            )
        values.setflags(write=False)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "_index", MappingProxyType({key: i for i, key in enumerate(self.keys)}))

    def rows(self, *key_vectors):
        """Subgroup row for each input row, -1 where a key is missing."""
        return np.array([self._index.get(key, -1) for key in zip(*key_vectors)], dtype=int)

    def take(self, *key_vectors):
        """Per-row coefficient matrix in input order; rows without a subgroup are NaN."""
        index = self.rows(*key_vectors)
        out = self.values[index]
        out[index < 0] = np.nan
        return out

    def column(self, name):
        return self.columns.index(name)


def _goff_table(horizon):
    frame = GOFF_2013.rename(columns={f"base_surv_{horizon}": "base_surv"})
    columns = ["base_surv", "mean"] + GOFF_2013_TERMS
    return CoefficientTable(
        name=f"Goff_2013_{horizon}",
        key_names=("sex", "race"),
        keys=tuple(zip(frame["sex"], frame["race"])),
        columns=tuple(columns),
        values=frame[columns].to_numpy(dtype=float),
    )


def _yadlowsky_table():
    columns = ["intercept"] + YADLOWSKY_2018_TERMS
    return CoefficientTable(
        name="Yadlowsky_2018_10",
        key_names=("sex",),
        keys=tuple((sex,) for sex in YADLOWSKY_2018["sex"]),
        columns=tuple(columns),
        values=YADLOWSKY_2018[columns].to_numpy(dtype=float),
    )


def prevent_tables_from_frame(frame: pd.DataFrame, prevent_type, horizon):
    """Split a PREVENT sheet (variable, women_<endpoint>, men_<endpoint>, ...) into per-endpoint tables."""
    if "variable" not in frame.columns:
        raise ConfigurationError(f"PREVENT sheet {prevent_type}_{horizon} has no 'variable' column")
    sheet = frame.set_index("variable")
    duplicated = sorted(set(sheet.index[sheet.index.duplicated()]))
    if duplicated:
        raise ConfigurationError(f"PREVENT sheet {prevent_type}_{horizon} repeats terms: {', '.join(duplicated)}")
    unknown = sorted(set(sheet.index) - set(PREVENT_TERMS))
    if unknown:
        raise ConfigurationError(f"PREVENT sheet {prevent_type}_{horizon} has unknown terms: {', '.join(unknown)}")
    sheet = sheet.reindex(PREVENT_TERMS)

    tables = {}
    for pred_type in ENDPOINTS:
        columns = [f"{prefix}_{pred_type}" for prefix in SEX_PREFIXES]
        present = [column in sheet.columns for column in columns]
        if not any(present):
            continue
        if not all(present):
            raise ConfigurationError(f"PREVENT sheet {prevent_type}_{horizon} has {pred_type} coefficients for one sex only")
        tables[(prevent_type, horizon, pred_type)] = CoefficientTable(
            name=f"{prevent_type}_{horizon}_{pred_type}",
            key_names=("sex",),
            keys=tuple((sex,) for sex in SEX_PREFIXES.values()),
            columns=tuple(PREVENT_TERMS),
            values=sheet[columns].fillna(0.0).to_numpy(dtype=float).T,
        )
    return tables


def load_prevent_directory(directory):
    """Read every <prevent_type>_<horizon>.csv sheet found in directory."""
    if not os.path.isdir(directory):
        raise ConfigurationError(f"coefficient directory {directory} does not exist")
    tables = {}
    for prevent_type in PREVENT_TYPES:
        for horizon in EQUATION_VERSIONS["Khan_2023"]["horizons"]:
            path = os.path.join(directory, f"{prevent_type}_{horizon}.csv")
            if not os.path.exists(path):
                continue
            logger.debug("Loading PREVENT coefficients from %s", path)
            tables.update(prevent_tables_from_frame(pd.read_csv(path), prevent_type, horizon))
    return tables

# -----------------------------
# Repository
# -----------------------------

@dataclass(frozen=True, eq=False)
class CoefficientRepository:
    """Immutable coefficient tables keyed by equation.

    pooled_cohort: (equation_version, horizon) -> CoefficientTable
    prevent: (prevent_type, horizon, pred_type) -> CoefficientTable
    """
    pooled_cohort: dict
    prevent: dict

    def __post_init__(self):
        object.__setattr__(self, "pooled_cohort", MappingProxyType(dict(self.pooled_cohort)))
        object.__setattr__(self, "prevent", MappingProxyType(dict(self.prevent)))

    def pooled_cohort_table(self, equation_version, horizon):
        try:
            return self.pooled_cohort[(equation_version, horizon)]
        except KeyError:
            raise CoefficientLookupError(f"no {equation_version} coefficients for a {horizon}-year horizon") from None

    def prevent_table(self, prevent_type, horizon, pred_type):
        try:
            return self.prevent[(prevent_type, horizon, pred_type)]
        except KeyError:
            raise CoefficientLookupError(
                f"no PREVENT {prevent_type} coefficients for {horizon}-year {pred_type} risk"
            ) from None

    def has_prevent(self, prevent_type, horizon, pred_type):
        return (prevent_type, horizon, pred_type) in self.prevent


def build_repository(coefficient_dir=None):
    """Bundled tables, plus any PREVENT sheets found in coefficient_dir (these take precedence)."""
    pooled = {("Goff_2013", h): _goff_table(h) for h in EQUATION_VERSIONS["Goff_2013"]["horizons"]}
    pooled[("Yadlowsky_2018", 10)] = _yadlowsky_table()

    prevent = {}
    for (prevent_type, horizon), sheet in PREVENT_SHEETS.items():
        prevent.update(prevent_tables_from_frame(sheet, prevent_type, horizon))
    if coefficient_dir is not None:
        prevent.update(load_prevent_directory(coefficient_dir))

    logger.debug("Coefficient repository built: %d pooled cohort, %d PREVENT tables", len(pooled), len(prevent))
    return CoefficientRepository(pooled_cohort=pooled, prevent=prevent)


@lru_cache()
def get_repository() -> CoefficientRepository:
    """Get cached repository built from the current settings."""
    return build_repository(get_settings().coefficient_dir)
