# File: familialdisease/datasets.py
# Location: familialdisease/familialdisease/datasets.py
"""
Published pedigree data and parameter sets.

- CHARKES_2006_NMTC: familial nonmedullary thyroid cancer kindreds, table 2 in
  Charkes (2006), ascertained on at least two affected relatives.
- THYROID_PARAMETERS: nonmedullary thyroid cancer parameters used for
  figure 1 in Dudbridge et al.
- COLORECTAL_PARAMETERS: colorectal cancer parameters used for the
  all-cases-familial examples in Dudbridge et al.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PedigreeSample:
    """Ascertained pedigrees as parallel affected (m) and known (k) counts."""

    m: Tuple[int, ...]
    k: Tuple[int, ...]
    r: int


@dataclass(frozen=True)
class ProbabilityParameters:
    """Familial risk, sporadic risk and prior probability of familial disease."""

    pf: float
    pr: float
    prior_f: float


CHARKES_2006_NMTC = PedigreeSample(
    m=(2, 2, 2, 4, 2, 2, 2),
    k=(9, 9, 10, 7, 9, 14, 7),
    r=2,
)

THYROID_PARAMETERS = ProbabilityParameters(pf=0.0981, pr=0.0031, prior_f=0.013)

COLORECTAL_PARAMETERS = ProbabilityParameters(pf=0.2, pr=0.05, prior_f=0.0865)
