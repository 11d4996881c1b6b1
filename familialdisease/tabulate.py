# File: familialdisease/tabulate.py
# Location: familialdisease/familialdisease/tabulate.py
"""
Batch evaluation of the segregation model.

tabulate_prob_familial() runs prob_familial() once per pedigree with shared
probability parameters and collects the results into a DataFrame, one row per
pedigree:

  m, k, mprob, rprob, prob_familial, all_familial

A scalar m or k is broadcast against the other argument, so a sweep over
pedigree sizes for a fixed number of affected relatives is a single call:

>>> tabulate_prob_familial(2, range(2, 9), 0.0981, 0.0031, 0.013)  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from familialdisease.errors import InputValidationError
from familialdisease.segregation import prob_familial

logger = logging.getLogger("familialdisease")

RESULT_COLUMNS = ["m", "k", "mprob", "rprob", "prob_familial", "all_familial"]


def tabulate_prob_familial(
    m: int | Sequence[int],
    k: int | Sequence[int],
    pf: float,
    pr: float,
    prior_f: float,
    r: int = 0,
) -> pd.DataFrame:
    """
    Evaluate prob_familial() for each pedigree.

    Parameters
    ----------
    m : int or sequence of int
        Affected relatives per pedigree.
    k : int or sequence of int
        Relatives with known affection status per pedigree.
    pf, pr, prior_f : float
        Shared probability parameters (see prob_familial).
    r : int
        Number of sporadic cases allowed for all_familial.

    Returns
    -------
    pd.DataFrame
        One row per pedigree, columns as in RESULT_COLUMNS. Undefined
        posteriors appear as NaN.

    Raises
    ------
    InputValidationError
        If m and k cannot be broadcast to a common non-empty length, or any
        pedigree fails prob_familial validation.
    """
    try:
        m_arr, k_arr = np.broadcast_arrays(np.atleast_1d(m), np.atleast_1d(k))
    except ValueError:
        raise InputValidationError(
            f"m and k must have the same length, got {np.size(m)} and {np.size(k)}",
            field="k",
        )
    if m_arr.ndim != 1 or m_arr.size == 0:
        raise InputValidationError("m and k must be non-empty one-dimensional", field="m")

    rows = []
    for m_i, k_i in zip(m_arr.tolist(), k_arr.tolist()):
        result = prob_familial(m_i, k_i, pf, pr, prior_f, r=r)
        rows.append({"m": int(m_i), "k": int(k_i), **result.to_dict()})

    n_undefined = sum(
        1 for row in rows if np.isnan(row["prob_familial"]) or np.isnan(row["all_familial"])
    )
    if n_undefined:
        logger.warning(f"{n_undefined} of {len(rows)} pedigrees have undefined posteriors")
    logger.debug(f"Tabulated familial probabilities for {len(rows)} pedigrees")

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
