# File: familialdisease/validators.py
# Location: familialdisease/familialdisease/validators.py

"""
Validation module for familialdisease.

This module provides functions to validate:
- Pedigree counts (non-negative integers, affected count within known count)
- Ascertainment thresholds (non-negative, not above the observed counts)
- Probability parameters (within [0, 1])

All checks run before any computation and raise InputValidationError on the
first problem found.
"""

import logging
import math
from numbers import Real
from typing import Sequence, Tuple, Union

import numpy as np

from familialdisease.errors import InputValidationError

logger = logging.getLogger("familialdisease")

Count = Union[int, float, np.integer]


def validate_count(value: Count, field: str) -> int:
    """
    Validate a single count and return it as an int.

    Integral floats (e.g. 2.0) are accepted.

    Raises
    ------
    InputValidationError
        If value is not a finite non-negative integer.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.integer)):
        raise InputValidationError(f"{field} must be an integer, got {value!r}", field=field)
    if not math.isfinite(value) or value != int(value):
        raise InputValidationError(f"{field} must be an integer, got {value!r}", field=field)
    if value < 0:
        raise InputValidationError(f"{field} must be non-negative, got {value!r}", field=field)
    return int(value)


def validate_probability(value: float, field: str) -> float:
    """
    Validate that value is a probability in [0, 1].

    Raises
    ------
    InputValidationError
        If value is not a real number, is NaN, or lies outside [0, 1].
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.floating, np.integer)):
        raise InputValidationError(f"{field} must be a number, got {value!r}", field=field)
    if not (0.0 <= value <= 1.0):
        raise InputValidationError(f"{field} must be in [0, 1], got {value!r}", field=field)
    return float(value)


def validate_pedigree(m: Count, k: Count, r: Count = 0) -> Tuple[int, int, int]:
    """
    Validate one pedigree summary for the segregation model.

    Parameters
    ----------
    m : int
        Number of affected relatives of the proband.
    k : int
        Number of relatives with known affection status.
    r : int
        Number of sporadic cases allowed among the m affected.

    Returns
    -------
    tuple of int
        (m, k, r) converted to int.

    Raises
    ------
    InputValidationError
        If any count is invalid, m > k, or r > m.
    """
    m = validate_count(m, "m")
    k = validate_count(k, "k")
    r = validate_count(r, "r")
    if m > k:
        raise InputValidationError(
            f"m ({m}) cannot exceed the number of relatives with known status k ({k})",
            field="m",
        )
    if r > m:
        raise InputValidationError(
            f"r ({r}) cannot exceed the number of affected relatives m ({m})", field="r"
        )
    return m, k, r


def validate_pedigree_sample(
    m: Sequence[Count], k: Sequence[Count], r: Count
) -> Tuple[np.ndarray, np.ndarray, int]:
    """
    Validate an ascertained sample of pedigrees for the penetrance estimator.

    Parameters
    ----------
    m : sequence of int
        Affected relatives per pedigree.
    k : sequence of int
        Relatives with known affection status per pedigree.
    r : int
        Ascertainment threshold every pedigree satisfies (m[i] >= r).

    Returns
    -------
    tuple
        (m, k, r) with m and k as int64 numpy arrays.

    Raises
    ------
    InputValidationError
        If the sample is empty, the sequences differ in length, any count is
        invalid, any m[i] > k[i], any k[i] == 0, or r > min(m).
    """
    m_list = list(np.atleast_1d(m))
    k_list = list(np.atleast_1d(k))

    if len(m_list) == 0:
        raise InputValidationError("At least one pedigree is required.", field="m")
    if len(m_list) != len(k_list):
        raise InputValidationError(
            f"m and k must have the same length, got {len(m_list)} and {len(k_list)}",
            field="k",
        )

    m_arr = np.array([validate_count(v, f"m[{i}]") for i, v in enumerate(m_list)], dtype=np.int64)
    k_arr = np.array([validate_count(v, f"k[{i}]") for i, v in enumerate(k_list)], dtype=np.int64)
    r = validate_count(r, "r")

    zero_trials = np.flatnonzero(k_arr == 0)
    if zero_trials.size:
        raise InputValidationError(
            f"Pedigrees must have at least one relative with known status; "
            f"k is 0 at positions {zero_trials.tolist()}",
            field="k",
        )

    excess = np.flatnonzero(m_arr > k_arr)
    if excess.size:
        raise InputValidationError(
            f"m cannot exceed k; violated at positions {excess.tolist()}", field="m"
        )

    if r > int(m_arr.min()):
        raise InputValidationError(
            f"Ascertainment threshold r ({r}) exceeds the smallest observed "
            f"affected count ({int(m_arr.min())})",
            field="r",
        )

    logger.debug(f"Validated {len(m_arr)} pedigrees with ascertainment threshold r={r}")
    return m_arr, k_arr, r
