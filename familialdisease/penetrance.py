# File: familialdisease/penetrance.py
# Location: familialdisease/familialdisease/penetrance.py
"""
Probability of a relative being affected with familial disease.

Given a series of pedigrees of different sizes, each with at least r affected
relatives of the proband, prob_affected_relative() estimates the probability
that a relative is affected with familial disease. The estimate is an average
over all observed relationships to probands and can be used as the pf
parameter of familialdisease.segregation.prob_familial().

Each pedigree contributes the binomial probability of m successes in k
trials, conditional on at least r successes:

    L_i(p) = Bin(m_i; k_i, p) / P(X_i >= r),    X_i ~ Bin(k_i, p)

The conditioning removes the likelihood mass of pedigrees that could not have
entered the sample (fewer than r affected relatives). Estimation is by maximum
likelihood over p in [0, 1] using a bounded Brent search.

References
----------
Dudbridge F, Brown SJ, Ward L, Wilson SG, Walsh JP.
  How many cases of disease in a pedigree imply familial disease?
Charkes ND (2006). On the prevalence of familial nonmedullary thyroid cancer
  in multiply affected kindreds. Thyroid 16:181-186.

Examples
--------
>>> from familialdisease.datasets import CHARKES_2006_NMTC as s
>>> prob_affected_relative(s.m, s.k, s.r)  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from scipy.optimize import minimize_scalar
from scipy.stats import binom

from familialdisease.config import EstimatorConfig, load_estimator_config
from familialdisease.errors import ConvergenceError
from familialdisease.validators import validate_pedigree_sample

logger = logging.getLogger("familialdisease")


def negative_log_likelihood(
    p: float,
    m: np.ndarray | Sequence[int],
    k: np.ndarray | Sequence[int],
    r: int,
) -> float:
    """
    Ascertainment-corrected negative log-likelihood of the pedigree sample.

    Parameters
    ----------
    p : float
        Candidate probability of a relative being affected with familial disease.
    m : array-like of int
        Affected relatives per pedigree.
    k : array-like of int
        Relatives with known affection status per pedigree.
    r : int
        Ascertainment threshold.

    Returns
    -------
    float
        -sum(log Bin(m_i; k_i, p) - log P(X_i >= r)). Returns +inf wherever the
        likelihood is zero or undefined (e.g. p=0 with r>0, or p=1 with some
        m_i < k_i), so the optimizer never selects such a point.
    """
    m = np.asarray(m)
    k = np.asarray(k)
    with np.errstate(divide="ignore", invalid="ignore"):
        # sf(r - 1) = P(X >= r); for r = 0 it is 1 and the log term vanishes
        log_lik = binom.logpmf(m, k, p) - binom.logsf(r - 1, k, p)
        total = -float(np.sum(log_lik))
    if not np.isfinite(total):
        return np.inf
    return total


def prob_affected_relative(
    m: Sequence[int],
    k: Sequence[int],
    r: int,
    config: EstimatorConfig | None = None,
) -> float:
    """
    Estimate the probability of a relative being affected with familial disease.

    Parameters
    ----------
    m : sequence of int
        One element per pedigree: the number of affected relatives of the proband.
    k : sequence of int
        One element per pedigree: the number of relatives of the proband with
        known affection status. Must match m in length, with k[i] >= m[i] and
        k[i] > 0.
    r : int
        Minimum number of affected relatives in each pedigree (ascertainment
        threshold). Must not exceed min(m). r=0 means no ascertainment
        correction.
    config : EstimatorConfig, optional
        Optimizer tolerance and iteration budget. Defaults to the values in the
        packaged config.json.

    Returns
    -------
    float
        Maximum-likelihood estimate of the per-relative familial probability.

    Raises
    ------
    InputValidationError
        If the pedigree sample or r is invalid.
    ConvergenceError
        If the bounded search does not reach the configured tolerance within
        the iteration budget, or its minimum is not finite.
    """
    m_arr, k_arr, r = validate_pedigree_sample(m, k, r)
    if config is None:
        config = load_estimator_config()

    result = minimize_scalar(
        negative_log_likelihood,
        bounds=(0.0, 1.0),
        args=(m_arr, k_arr, r),
        method="bounded",
        options={"xatol": config.xatol, "maxiter": config.maxiter},
    )

    if not result.success:
        raise ConvergenceError(
            f"Likelihood maximisation did not converge within {config.maxiter} "
            f"evaluations (xatol={config.xatol})",
            iterations=int(result.nfev),
            last_iterate=float(result.x),
            optimizer_message=str(result.message),
        )
    if not np.isfinite(result.fun):
        raise ConvergenceError(
            "Likelihood is zero over the whole search interval; no estimate exists",
            iterations=int(result.nfev),
            last_iterate=float(result.x),
            optimizer_message=str(result.message),
        )

    pf = float(result.x)
    logger.debug(
        f"Estimated pf={pf:.8g} from {len(m_arr)} pedigrees (r={r}, "
        f"negative log-likelihood={result.fun:.6g}, {result.nfev} evaluations)"
    )
    return pf
