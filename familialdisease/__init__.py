# File: familialdisease/__init__.py
# Location: familialdisease/familialdisease/__init__.py

"""
familialdisease Package.

This package estimates the probability of a relative being affected with
familial disease from ascertained pedigrees, and computes the probability
that a pedigree is segregating familial rather than sporadic disease.

Public API
----------
prob_affected_relative : ML estimate of pf under ascertainment
prob_familial          : Familial/sporadic probabilities for one pedigree
tabulate_prob_familial : prob_familial over many pedigrees as a DataFrame
FamilialDiseaseResult  : Result dataclass returned by prob_familial
EstimatorConfig        : Optimizer settings for prob_affected_relative
"""

from familialdisease.config import EstimatorConfig
from familialdisease.errors import ConvergenceError, FamilialDiseaseError, InputValidationError
from familialdisease.penetrance import prob_affected_relative
from familialdisease.segregation import FamilialDiseaseResult, prob_familial
from familialdisease.tabulate import tabulate_prob_familial

from .version import __version__

__all__ = [
    "ConvergenceError",
    "EstimatorConfig",
    "FamilialDiseaseError",
    "FamilialDiseaseResult",
    "InputValidationError",
    "__version__",
    "prob_affected_relative",
    "prob_familial",
    "tabulate_prob_familial",
]
