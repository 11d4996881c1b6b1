# File: familialdisease/config.py
# Location: familialdisease/familialdisease/config.py

"""
Configuration management module.

This module handles loading configuration from a JSON file.
All default values reside in config.json, which is included in
the installed package directory.

If no config_file is provided, this module attempts to load the default
config.json from the package installation directory.

Configuration Keys
------------------
- "estimator.xatol": float
    Absolute tolerance on the estimated probability for the bounded
    optimizer. Must lie in (0, 1e-6]. Default: 1e-8.
- "estimator.maxiter": int
    Maximum number of objective evaluations. Default: 500.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from familialdisease.errors import InputValidationError

# Coarsest argument tolerance the estimator accepts.
MAX_XATOL = 1e-6


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    If no config_file is provided, the function attempts to load the
    'config.json' from the installed package directory. If it fails
    to find or parse the file, it raises an error.

    Parameters
    ----------
    config_file : str, optional
        Path to a configuration file in JSON format. If None, defaults to
        the package-installed 'config.json'.

    Returns
    -------
    dict
        Configuration dictionary loaded from the JSON file.

    Raises
    ------
    FileNotFoundError
        If the specified configuration file does not exist.
    ValueError
        If there is an error parsing the JSON configuration file.
    """
    if not config_file:
        config_file = os.path.join(os.path.dirname(__file__), "config.json")

    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file '{config_file}' not found.")

    with open(config_file, "r", encoding="utf-8") as f:
        try:
            config = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error parsing JSON configuration: {e}")

    return config


@dataclass(frozen=True)
class EstimatorConfig:
    """
    Settings for the bounded likelihood maximisation in prob_affected_relative.

    Fields
    ------
    xatol : float
        Absolute convergence tolerance on the estimated probability.
        Default: 1e-8.
    maxiter : int
        Maximum number of objective evaluations before the search is
        declared non-convergent. Default: 500.
    """

    xatol: float = 1e-8
    maxiter: int = 500

    def __post_init__(self) -> None:
        if not (0.0 < self.xatol <= MAX_XATOL):
            raise InputValidationError(
                f"xatol must be in (0, {MAX_XATOL}], got {self.xatol}", field="xatol"
            )
        if int(self.maxiter) != self.maxiter or self.maxiter < 1:
            raise InputValidationError(
                f"maxiter must be a positive integer, got {self.maxiter}", field="maxiter"
            )

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> EstimatorConfig:
        """Build an EstimatorConfig from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})


def load_estimator_config(config_file: Optional[str] = None) -> EstimatorConfig:
    """
    Load the "estimator" section of a configuration file.

    Missing keys fall back to the EstimatorConfig defaults.
    """
    config = load_config(config_file)
    return EstimatorConfig.from_dict(config.get("estimator", {}))
