"""Tests for central-difference delta and gamma."""

import numpy as np
import pytest

from option_analytics.contract import OptionContract
from option_analytics.exceptions import InvalidFactorValue, ValidationError
from option_analytics.valuation import FiniteDifferenceParams, OptionValuation


class TestApproxDelta:
    def setup_method(self):
        self.call = OptionContract.from_values(T=1.5, K=120, sig=0.4, r=0.04, b=0.0, S=100)
        self.put = OptionContract.from_values(
            T=1.5, K=120, sig=0.4, r=0.04, b=0.0, S=100, option_type="P"
        )

    @pytest.mark.parametrize("which", ["call", "put"])
    def test_matches_closed_form(self, which):
        val = OptionValuation(getattr(self, which))
        assert np.isclose(val.approx_delta(1e-4), val.delta(), atol=1e-3)

    def test_default_bump_from_params(self):
        val = OptionValuation(self.call, fd_params=FiniteDifferenceParams(bump=0.5))
        assert val.approx_delta() == val.approx_delta(0.5)

    def test_explicit_center(self):
        val = OptionValuation(self.call)
        assert np.isclose(val.approx_delta(1e-3, spot=130.0), val.delta_at("S", 130.0), atol=1e-4)

    def test_contract_unchanged(self):
        val = OptionValuation(self.call)
        before = self.call.copy()
        val.approx_delta(0.01)
        val.approx_gamma(0.01)
        assert self.call == before

    @pytest.mark.parametrize("h", [0.0, np.nan, np.inf])
    def test_invalid_bump(self, h):
        with pytest.raises(ValidationError):
            OptionValuation(self.call).approx_delta(h)

    def test_bump_below_zero_spot(self):
        contract = OptionContract.from_values(T=1.0, K=100, sig=0.2, r=0.05, b=0.05, S=0.0)
        with pytest.raises(InvalidFactorValue):
            OptionValuation(contract).approx_delta(0.01)


class TestApproxGamma:
    def setup_method(self):
        self.contract = OptionContract.from_values(T=1.5, K=120, sig=0.4, r=0.04, b=0.0, S=100)

    def test_matches_closed_form(self):
        val = OptionValuation(self.contract)
        assert np.isclose(val.approx_gamma(0.01), val.gamma(), atol=1e-5)

    def test_same_for_call_and_put(self):
        val = OptionValuation(self.contract)
        call_gamma = val.approx_gamma(0.01)
        self.contract.toggle()
        assert np.isclose(val.approx_gamma(0.01), call_gamma, atol=1e-6)


class TestFiniteDifferenceParams:
    @pytest.mark.parametrize("bump", [0.0, -0.01, np.inf])
    def test_invalid_bump(self, bump):
        with pytest.raises(ValueError):
            FiniteDifferenceParams(bump=bump)
