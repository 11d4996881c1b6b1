"""
Unit tests for the familial segregation model.

Covers the published colorectal cancer values, closed-form identities of the
familial likelihood, monotonicity of all_familial in r, degenerate models and
input validation.
"""

from __future__ import annotations

import dataclasses
import logging
import math

import pytest
from scipy.stats import binom

from familialdisease.errors import InputValidationError
from familialdisease.segregation import FamilialDiseaseResult, prob_familial

# ---------------------------------------------------------------------------
# Published values
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestPublishedValues:
    """all_familial against the colorectal cancer examples (Dudbridge et al.)."""

    @pytest.mark.parametrize(
        "m,k,r",
        [(2, 8, 0), (8, 8, 0), (2, 8, 1), (8, 8, 1)],
    )
    def test_all_familial_colorectal(
        self, m, k, r, colorectal_params, colorectal_all_familial_reference
    ):
        p = colorectal_params
        result = prob_familial(m, k, p.pf, p.pr, p.prior_f, r=r)
        expected = colorectal_all_familial_reference[(m, k, r)]
        assert result.all_familial == pytest.approx(expected, abs=1e-5)

    def test_all_cases_familial_closed_form(self, colorectal_params):
        """With m == k and r=0, all_familial is (pf / (1 - (1-pf)(1-pr)))^k."""
        p = colorectal_params
        combined = 1.0 - (1.0 - p.pf) * (1.0 - p.pr)
        result = prob_familial(8, 8, p.pf, p.pr, p.prior_f)
        assert result.all_familial == pytest.approx((p.pf / combined) ** 8, rel=1e-12)


# ---------------------------------------------------------------------------
# Likelihood identities
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestLikelihoods:
    """mprob and rprob against reference binomial computations."""

    @pytest.mark.parametrize("m,k", [(0, 5), (1, 1), (2, 8), (3, 10), (7, 12)])
    def test_rprob_is_binomial_pmf(self, m, k):
        pr = 0.05
        expected = math.comb(k, m) * pr**m * (1 - pr) ** (k - m)
        result = prob_familial(m, k, 0.2, pr, 0.1)
        assert result.rprob == pytest.approx(expected, rel=1e-12)

    def test_mprob_equal_rates(self):
        """pf == pr: each relative is affected with probability 1 - (1-p)^2."""
        result = prob_familial(2, 8, 0.3, 0.3, 0.5)
        assert result.rprob == pytest.approx(binom.pmf(2, 8, 0.3), rel=1e-12)
        assert result.mprob == pytest.approx(binom.pmf(2, 8, 1 - 0.7**2), rel=1e-10)

    @pytest.mark.parametrize("m,k", [(0, 4), (2, 8), (5, 9), (8, 8)])
    def test_mprob_is_binomial_at_combined_risk(self, m, k):
        """The convolution collapses to Bin(m; k, 1 - (1-pf)(1-pr))."""
        pf, pr = 0.2, 0.05
        combined = 1 - (1 - pf) * (1 - pr)
        result = prob_familial(m, k, pf, pr, 0.0865)
        assert result.mprob == pytest.approx(binom.pmf(m, k, combined), rel=1e-10)

    def test_mprob_explicit_sum(self):
        m, k, pf, pr = 3, 7, 0.25, 0.1
        expected = sum(
            math.comb(k, j) * pf**j * (1 - pf) ** (k - j)
            * math.comb(k - j, m - j) * pr ** (m - j) * (1 - pr) ** (k - m)
            for j in range(m + 1)
        )
        assert prob_familial(m, k, pf, pr, 0.1).mprob == pytest.approx(expected, rel=1e-12)

    def test_probabilities_in_unit_interval(self):
        for k in range(0, 13):
            for m in range(0, k + 1):
                for pf, pr in [(0.01, 0.001), (0.2, 0.05), (0.5, 0.3), (0.9, 0.6)]:
                    result = prob_familial(m, k, pf, pr, 0.1)
                    for value in (result.mprob, result.rprob, result.prob_familial):
                        assert -1e-9 <= value <= 1 + 1e-9
                    assert -1e-9 <= result.all_familial <= 1 + 1e-9


# ---------------------------------------------------------------------------
# Posterior probabilities
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestPosterior:
    """prob_familial (Bayes) and all_familial behaviour."""

    def test_bayes_rule(self):
        result = prob_familial(2, 6, 0.0981, 0.0031, 0.013)
        expected = (result.mprob * 0.013) / (result.mprob * 0.013 + result.rprob * 0.987)
        assert result.prob_familial == pytest.approx(expected, rel=1e-12)

    def test_prior_extremes(self):
        assert prob_familial(2, 6, 0.2, 0.05, 0.0).prob_familial == 0.0
        assert prob_familial(2, 6, 0.2, 0.05, 1.0).prob_familial == 1.0

    def test_more_affected_more_familial(self):
        """For fixed k, more affected relatives raise the posterior."""
        posteriors = [prob_familial(m, 8, 0.0981, 0.0031, 0.013).prob_familial for m in range(9)]
        assert posteriors == sorted(posteriors)

    @pytest.mark.parametrize("m,k", [(2, 8), (5, 10), (8, 8)])
    def test_all_familial_monotone_in_r(self, m, k):
        values = [prob_familial(m, k, 0.2, 0.05, 0.0865, r=r).all_familial for r in range(m + 1)]
        for lower, higher in zip(values, values[1:]):
            assert higher >= lower - 1e-12

    @pytest.mark.parametrize("m,k", [(1, 3), (4, 9), (8, 8)])
    def test_all_familial_is_one_when_r_equals_m(self, m, k):
        assert prob_familial(m, k, 0.2, 0.05, 0.0865, r=m).all_familial == pytest.approx(1.0)

    def test_no_affected_relatives(self):
        result = prob_familial(0, 5, 0.2, 0.05, 0.0865)
        assert result.all_familial == pytest.approx(1.0)
        assert result.prob_familial < 0.0865


# ---------------------------------------------------------------------------
# Degenerate models and edge cases
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestDegenerate:
    """Zero familial likelihood yields NaN posteriors, not exceptions."""

    def test_zero_mprob_with_sporadic_support(self, caplog):
        # pf=1 forces every relative to be familial-affected, so m < k is impossible
        with caplog.at_level(logging.WARNING, logger="familialdisease"):
            result = prob_familial(2, 8, 1.0, 0.05, 0.1)
        assert result.mprob == 0.0
        assert result.rprob > 0.0
        assert result.prob_familial == 0.0
        assert math.isnan(result.all_familial)
        assert not result.is_defined
        assert "Degenerate familial model" in caplog.text

    def test_zero_mprob_and_rprob(self):
        result = prob_familial(1, 3, 0.0, 0.0, 0.5)
        assert result.mprob == 0.0
        assert result.rprob == 0.0
        assert math.isnan(result.prob_familial)
        assert math.isnan(result.all_familial)
        assert not result.is_defined

    def test_no_relatives(self):
        """k=0, m=0 carries no information: likelihoods are 1, posterior = prior."""
        result = prob_familial(0, 0, 0.2, 0.05, 0.0865)
        assert result.mprob == pytest.approx(1.0)
        assert result.rprob == pytest.approx(1.0)
        assert result.all_familial == pytest.approx(1.0)
        assert result.prob_familial == pytest.approx(0.0865)
        assert result.is_defined

    def test_pf_zero_reduces_to_sporadic(self):
        result = prob_familial(2, 8, 0.0, 0.05, 0.2)
        assert result.mprob == pytest.approx(result.rprob)
        assert result.prob_familial == pytest.approx(0.2)
        assert result.all_familial == 0.0


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestValidation:
    """Invalid inputs are rejected before computation."""

    @pytest.mark.parametrize(
        "kwargs,field",
        [
            ({"m": 9, "k": 8}, "m"),
            ({"m": 1, "k": 0}, "m"),
            ({"m": -1, "k": 8}, "m"),
            ({"m": 2, "k": -3}, "k"),
            ({"m": 2.5, "k": 8}, "m"),
            ({"m": 2, "k": 8, "r": 3}, "r"),
            ({"m": 2, "k": 8, "r": -1}, "r"),
            ({"pf": 1.5}, "pf"),
            ({"pr": -0.1}, "pr"),
            ({"prior_f": float("nan")}, "prior_f"),
        ],
    )
    def test_rejects_invalid(self, kwargs, field):
        args = {"m": 2, "k": 8, "pf": 0.2, "pr": 0.05, "prior_f": 0.0865, "r": 0}
        args.update(kwargs)
        with pytest.raises(InputValidationError) as excinfo:
            prob_familial(**args)
        assert excinfo.value.field == field

    def test_integral_floats_accepted(self):
        assert prob_familial(2.0, 8.0, 0.2, 0.05, 0.0865) == prob_familial(2, 8, 0.2, 0.05, 0.0865)


# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestFamilialDiseaseResult:
    """FamilialDiseaseResult behaviour."""

    def test_to_dict(self):
        result = prob_familial(2, 8, 0.2, 0.05, 0.0865)
        assert result.to_dict() == {
            "mprob": result.mprob,
            "rprob": result.rprob,
            "prob_familial": result.prob_familial,
            "all_familial": result.all_familial,
        }

    def test_frozen(self):
        result = FamilialDiseaseResult(0.1, 0.2, 0.3, 0.4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.mprob = 0.5  # type: ignore[misc]

    def test_repeated_calls_identical(self):
        assert prob_familial(5, 11, 0.13, 0.02, 0.05, r=2) == prob_familial(
            5, 11, 0.13, 0.02, 0.05, r=2
        )
