"""Tests for the investment calculator and result entity."""
import math
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from crypto_analysis.domain.calculator import LAMBO_PRICE, calculate
from crypto_analysis.domain.entities import InvestmentResult, PricePoint


def test_doubling_price():
    result = calculate("ETH", 1000, 100, 200)

    assert result.symbol == "ETH"
    assert result.investment == 1000
    assert result.number_of_coins == 10
    assert result.profit == 1000.00
    assert result.growth_factor == 1.0
    assert result.lambos == 0.005
    assert result.is_valid()


def test_halving_price():
    result = calculate("BTC", 1000, 200, 100)

    assert result.number_of_coins == 5
    assert result.profit == -500.00
    assert result.growth_factor == -0.5


def test_lambos():
    result = calculate("ETH", 10000, 100, 5000)

    assert result.profit == 490000.00
    assert result.lambos == pytest.approx(2.45)


@pytest.mark.parametrize(
    "investment,start,end",
    [(1000, 3, 7), (250.5, 0.0123, 1.987), (1, 64000, 12345.6789)],
)
def test_rounding(investment, start, end):
    result = calculate("SOL", investment, start, end)

    coins = investment / start
    profit = round(coins * end - investment, 2)
    assert result.number_of_coins == pytest.approx(coins)
    assert result.profit == pytest.approx(profit)
    assert result.growth_factor == pytest.approx(round(profit / investment, 4), abs=1e-4)
    assert result.lambos == pytest.approx(round(profit / LAMBO_PRICE, 4), abs=1e-4)


def test_generation_date_is_now():
    before = datetime.now(timezone.utc)
    result = calculate("ETH", 1000, 100, 200)
    after = datetime.now(timezone.utc)

    assert before <= result.generation_date <= after


def test_zero_start_price_is_not_finite():
    result = calculate("ETH", 1000, 0, 200)

    assert math.isinf(result.number_of_coins)
    assert not result.is_valid()


def test_zero_start_and_end_price_is_nan():
    result = calculate("ETH", 1000, 0, 0)

    assert math.isnan(result.profit)
    assert not result.is_valid()


def test_result_is_immutable():
    result = calculate("ETH", 1000, 100, 200)

    with pytest.raises(ValidationError):
        result.profit = 0


def test_is_valid_checks_each_field():
    base = dict(
        symbol="ETH",
        investment=1000,
        number_of_coins=10,
        profit=1000,
        growth_factor=1,
        lambos=0.005,
        generation_date=datetime.now(timezone.utc),
    )
    assert InvestmentResult(**base).is_valid()
    for field in ("number_of_coins", "profit", "growth_factor"):
        assert not InvestmentResult(**{**base, field: math.nan}).is_valid()
        assert not InvestmentResult(**{**base, field: math.inf}).is_valid()


def test_price_point_chart_format():
    point = PricePoint(timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc), price=3000.5)

    assert point.to_chart_format() == {"x": "2024-01-01T00:00:00+00:00", "y": 3000.5}


@pytest.mark.parametrize(
    "start,end,profit",
    [(8, 9, 0.13), (8, 7, -0.13)],
)
def test_profit_ties_round_away_from_zero(start, end, profit):
    # 1/8 of a dollar either way is an exact binary tie at two decimals
    assert calculate("ETH", 1, start, end).profit == profit


def test_four_decimal_ties_round_away_from_zero():
    growth = calculate("ETH", 32, 32, 33)
    assert growth.growth_factor == 0.0313

    lambos = calculate("ETH", 100, 1, 63.5)
    assert lambos.profit == 6250.0
    assert lambos.lambos == 0.0313
