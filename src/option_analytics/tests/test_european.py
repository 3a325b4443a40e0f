"""Tests for the closed-form European kernels and their valuation front end."""

import numpy as np
import pytest

from option_analytics.contract import OptionContract
from option_analytics.enums import OptionType
from option_analytics.exceptions import ConfigurationError
from option_analytics.utils import put_call_parity_gap
from option_analytics.valuation import OptionValuation
from option_analytics.valuation import european

# (T, K, sig, r, b, S)
PARITY_GRID = [
    (1.5, 120.0, 0.4, 0.04, 0.0, 100.0),
    (1.0, 100.0, 0.2, 0.05, 0.05, 100.0),
    (0.5, 70.0, 0.35, 0.10, 0.05, 75.0),
    (0.25, 50.0, 0.15, 0.02, 0.01, 60.0),
    (2.0, 80.0, 0.6, 0.08, 0.03, 40.0),
]


class TestKnownValues:
    def test_stock_option(self):
        """b = r reduces to plain Black-Scholes."""
        args = (1.0, 100.0, 0.2, 0.05, 0.05, 100.0)
        assert np.isclose(european.call_price(*args), 10.4506, atol=1e-4)
        assert np.isclose(european.put_price(*args), 5.5735, atol=1e-4)

    def test_futures_option(self):
        """b = 0 is Black-76; at the money call and put coincide."""
        args = (0.75, 19.0, 0.28, 0.10, 0.0, 19.0)
        call = european.call_price(*args)
        put = european.put_price(*args)
        assert np.isclose(call, 1.7011, atol=1e-3)
        assert np.isclose(call, put, atol=1e-12)

    def test_generalized_put(self):
        args = (0.5, 70.0, 0.35, 0.10, 0.05, 75.0)
        assert np.isclose(european.put_price(*args), 4.0870, atol=2e-3)


class TestEuropeanProperties:
    @pytest.mark.parametrize("args", PARITY_GRID)
    def test_cost_of_carry_parity(self, args):
        T, K, sig, r, b, S = args
        call = european.call_price(*args)
        put = european.put_price(*args)
        gap = put_call_parity_gap(call_price=call, put_price=put, T=T, K=K, r=r, b=b, S=S)
        assert abs(gap) <= 1e-9 * max(1.0, S)

    @pytest.mark.parametrize("args", PARITY_GRID)
    def test_delta_bounds(self, args):
        T, _, _, r, b, _ = args
        bound = np.exp((b - r) * T)
        call_delta = european.call_delta(*args)
        put_delta = european.put_delta(*args)
        assert 0.0 <= call_delta <= bound
        assert -bound <= put_delta <= 0.0
        assert np.isclose(call_delta - put_delta, bound)

    @pytest.mark.parametrize("args", PARITY_GRID)
    def test_gamma_non_negative(self, args):
        assert european.gamma(*args) >= 0.0

    @pytest.mark.parametrize("args", PARITY_GRID)
    def test_prices_non_negative(self, args):
        assert european.call_price(*args) >= 0.0
        assert european.put_price(*args) >= 0.0


class TestDegenerateInputs:
    def test_zero_volatility_in_the_money_call(self):
        # Deterministic limit: discounted intrinsic value of the forward.
        T, K, r, b, S = 1.0, 90.0, 0.05, 0.05, 100.0
        expected = S * np.exp((b - r) * T) - K * np.exp(-r * T)
        assert np.isclose(european.call_price(T, K, 0.0, r, b, S), expected)
        assert european.put_price(T, K, 0.0, r, b, S) == 0.0
        assert european.gamma(T, K, 0.0, r, b, S) == 0.0

    def test_zero_expiry_is_intrinsic(self):
        assert np.isclose(european.call_price(0.0, 90.0, 0.3, 0.05, 0.0, 100.0), 10.0)
        assert np.isclose(european.put_price(0.0, 110.0, 0.3, 0.05, 0.0, 100.0), 10.0)
        assert european.call_delta(0.0, 90.0, 0.3, 0.05, 0.0, 100.0) == 1.0

    def test_zero_spot(self):
        T, K, sig, r, b = 1.0, 100.0, 0.2, 0.05, 0.0
        assert european.call_price(T, K, sig, r, b, 0.0) == 0.0
        assert np.isclose(european.put_price(T, K, sig, r, b, 0.0), K * np.exp(-r * T))
        assert european.gamma(T, K, sig, r, b, 0.0) == 0.0


class TestEuropeanValuation:
    def test_example_contract(self, euro_call_valuation, euro_put_valuation):
        call = euro_call_valuation.price()
        put = euro_put_valuation.price()
        assert call > 0.0 and put > 0.0
        assert np.isclose(call, european.call_price(1.5, 120.0, 0.4, 0.04, 0.0, 100.0))
        assert np.isclose(put, european.put_price(1.5, 120.0, 0.4, 0.04, 0.0, 100.0))

    def test_gamma_same_for_call_and_put(self, euro_call_valuation, euro_put_valuation):
        assert euro_call_valuation.gamma() == euro_put_valuation.gamma()

    def test_toggle_is_seen_by_valuation(self, euro_call):
        val = OptionValuation(euro_call)
        call = val.price()
        euro_call.toggle()
        assert val.option_type is OptionType.PUT
        assert np.isclose(val.price(), european.put_price(*euro_call.factors.as_tuple()))
        euro_call.toggle()
        assert val.price() == call

    def test_point_queries_use_registered_kernels(self, euro_call_valuation):
        args = euro_call_valuation.factors.as_tuple()
        assert euro_call_valuation.delta() == european.call_delta(*args)
        assert euro_call_valuation.gamma() == european.gamma(*args)

    def test_at_queries(self, euro_call_valuation):
        expected = european.call_price(1.5, 120.0, 0.4, 0.04, 0.0, 110.0)
        assert euro_call_valuation.price_at("S", 110.0) == expected
        assert euro_call_valuation.delta_at("s", 110.0) == european.call_delta(
            1.5, 120.0, 0.4, 0.04, 0.0, 110.0
        )

    def test_non_contract_rejected(self):
        with pytest.raises(ConfigurationError):
            OptionValuation((1.5, 120.0, 0.4, 0.04, 0.0, 100.0))

    def test_default_contract_prices(self):
        # T = 0, S = 0, K = 1: a worthless call and a put worth the strike.
        val = OptionValuation(OptionContract())
        assert val.price() == 0.0
        val.contract.toggle()
        assert np.isclose(val.price(), 1.0)
