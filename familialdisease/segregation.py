# File: familialdisease/segregation.py
# Location: familialdisease/familialdisease/segregation.py
"""
Probability that a pedigree is segregating familial disease.

Given k relatives of the proband, among which m are affected, prob_familial()
calculates the probability that the pedigree is segregating familial disease
as opposed to simply having m sporadic cases.

pf can be understood as a combination of penetrance and relatedness. For
first degree relatives and a fully penetrant dominant mutation pf=0.5: a full
sibling of the proband has 0.5 probability of inheriting the same mutation, a
child has 0.5 probability of receiving it, and a parent 0.5 probability of
being the one who transmitted it. For pedigrees with a mix of relationships,
pf is the average over all observed relatives of the proband. For a rare
disease, pr is approximately the population lifetime risk.

Formulas (Dudbridge et al., equations 1 and 2)
----------------------------------------------
- mprob        = sum_{j=0..m} Bin(j; k, pf) * Bin(m-j; k-j, pr)
- rprob        = Bin(m; k, pr)
- prob_familial = mprob*priorF / (mprob*priorF + rprob*(1-priorF))
- all_familial = sum_{j=m-r..m} Bin(j; k, pf) * Bin(m-j; k-j, pr) / mprob

j counts the affected relatives who have the familial form; the remaining
m-j arise sporadically among the k-j relatives not already affected.

Degenerate models
-----------------
When mprob is 0 (e.g. pf=0 with m>0) all_familial is 0/0 and is returned as
NaN, as is prob_familial when its denominator also vanishes. Callers must
check FamilialDiseaseResult.is_defined before using those fields.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass

import numpy as np
from scipy.stats import binom

from familialdisease.validators import validate_pedigree, validate_probability

logger = logging.getLogger("familialdisease")


@dataclass(frozen=True)
class FamilialDiseaseResult:
    """
    Probabilities derived for one pedigree.

    Fields
    ------
    mprob : float
        Probability of m affected relatives in a pedigree segregating
        familial disease.
    rprob : float
        Probability of m affected relatives in a pedigree with only sporadic
        disease (binomial probability).
    prob_familial : float
        Posterior probability that the pedigree is segregating familial
        disease. NaN when undefined.
    all_familial : float
        Probability that all cases in a familial pedigree are familial,
        except for up to r sporadic cases. NaN when mprob is 0.
    """

    mprob: float
    rprob: float
    prob_familial: float
    all_familial: float

    @property
    def is_defined(self) -> bool:
        """False when the model is degenerate and the posteriors are NaN."""
        return not (math.isnan(self.prob_familial) or math.isnan(self.all_familial))

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def _familial_terms(m: int, k: int, pf: float, pr: float) -> np.ndarray:
    """Bin(j; k, pf) * Bin(m-j; k-j, pr) for j = 0..m."""
    j = np.arange(m + 1)
    return binom.pmf(j, k, pf) * binom.pmf(m - j, k - j, pr)


def prob_familial(
    m: int,
    k: int,
    pf: float,
    pr: float,
    prior_f: float,
    r: int = 0,
) -> FamilialDiseaseResult:
    """
    Compute the probability that a pedigree is segregating familial disease.

    Parameters
    ----------
    m : int
        Number of affected relatives of the proband.
    k : int
        Number of relatives of the proband with known affection status.
    pf : float
        Probability of a relative being affected with familial disease.
    pr : float
        Probability of a relative being affected with sporadic disease.
    prior_f : float
        Prior probability that a pedigree is segregating familial disease.
    r : int
        Number of sporadic cases allowed when calculating the probability that
        all cases are familial. With r=0, all_familial is the probability that
        all m cases are familial; otherwise that at least m-r of them are.

    Returns
    -------
    FamilialDiseaseResult

    Raises
    ------
    InputValidationError
        If counts are negative or non-integer, m > k, r > m, or a probability
        lies outside [0, 1].

    Examples
    --------
    Colorectal cancer, probabilities that all cases are familial:

    >>> prob_familial(2, 8, 0.2, 0.05, 0.0865).all_familial  # doctest: +ELLIPSIS
    0.69444...
    >>> prob_familial(8, 8, 0.2, 0.05, 0.0865, r=1).all_familial  # doctest: +ELLIPSIS
    0.60467...
    """
    m, k, r = validate_pedigree(m, k, r)
    pf = validate_probability(pf, "pf")
    pr = validate_probability(pr, "pr")
    prior_f = validate_probability(prior_f, "prior_f")

    terms = _familial_terms(m, k, pf, pr)
    mprob = float(terms.sum())
    rprob = float(binom.pmf(m, k, pr))

    familial_mass = mprob * prior_f
    denominator = familial_mass + rprob * (1.0 - prior_f)
    famprob = familial_mass / denominator if denominator > 0 else math.nan
    all_familial = float(terms[m - r :].sum()) / mprob if mprob > 0 else math.nan

    result = FamilialDiseaseResult(
        mprob=mprob,
        rprob=rprob,
        prob_familial=famprob,
        all_familial=all_familial,
    )
    if not result.is_defined:
        logger.warning(
            f"Degenerate familial model for m={m}, k={k}, pf={pf}, pr={pr}: "
            f"mprob={mprob}; posterior probabilities are undefined (NaN)"
        )
    return result
