from __future__ import annotations

from math import isclose

import pytest

from investcalc.core.projection import project_compound_growth
from investcalc.core.scenario import ScenarioPolicy, run_scenario, simulate_scenario
from investcalc.schemas.scenario import ScenarioInput


def balances(points) -> list:
    return [point.balance for point in points]


def run(**overrides):
    params = dict(
        principal=10000,
        monthly_contribution=200,
        base_annual_rate_percent=9,
        inflation_rate_percent=3,
        recession_return_percent=-15,
        recession_start_year=10,
        recession_duration_years=2,
        income_growth_percent=0,
        years=32,
    )
    params.update(overrides)
    return simulate_scenario(**params)


def test_zero_duration_recession_matches_compound_projector():
    scenario = run(recession_duration_years=0)
    base = project_compound_growth(10000, 200, 9, 32)

    assert balances(scenario.series) == balances(base.series)
    assert scenario.finalValue == base.summary.finalValue


def test_recession_lowers_final_value():
    calm = run(recession_duration_years=0)
    recession = run()

    assert recession.finalValue < calm.finalValue


def test_recession_only_touches_years_inside_the_window():
    calm = balances(run(recession_duration_years=0).series)
    recession = balances(run(recession_start_year=10, recession_duration_years=2).series)

    # years 1..9 grow at the base rate
    assert recession[:10] == calm[:10]
    assert recession[10] < calm[10]


def test_recession_year_uses_recession_rate():
    result = run(
        principal=1000,
        monthly_contribution=0,
        base_annual_rate_percent=12,
        recession_return_percent=-12,
        recession_start_year=2,
        recession_duration_years=1,
        years=3,
    )
    series = balances(result.series)

    assert isclose(series[1], 1000 * 1.01 ** 12, rel_tol=1e-12)
    assert isclose(series[2], series[1] * 0.99 ** 12, rel_tol=1e-12)
    assert isclose(series[3], series[2] * 1.01 ** 12, rel_tol=1e-12)


def test_income_growth_compounds_contribution_before_it_is_added():
    result = run(
        principal=0,
        monthly_contribution=100,
        base_annual_rate_percent=0,
        recession_duration_years=0,
        income_growth_percent=12,
        years=1,
    )

    expected = 100 * 1.01 * (1.01 ** 12 - 1) / 0.01
    assert isclose(result.totalContributed, expected, rel_tol=1e-12)
    assert isclose(result.finalValue, expected, rel_tol=1e-12)


def test_income_growth_raises_total_contributed():
    flat = run(income_growth_percent=0)
    growing = run(income_growth_percent=3)

    assert flat.totalContributed == pytest.approx(200 * 12 * 32)
    assert growing.totalContributed > flat.totalContributed
    assert growing.finalValue > flat.finalValue


def test_inflation_is_echoed_but_not_applied():
    low = run(inflation_rate_percent=0)
    high = run(inflation_rate_percent=10)

    assert balances(low.series) == balances(high.series)
    assert high.inflationRatePercent == 10


def test_policy_switches_rate_by_year():
    policy = ScenarioPolicy(100, 12, -12, 3, 2, 0)

    assert not policy.in_recession(2)
    assert policy.in_recession(3)
    assert policy.in_recession(4)
    assert not policy.in_recession(5)
    assert policy(3, 1) == (100.0, policy.recession_rate)


def test_run_scenario_uses_page_defaults():
    result = run_scenario(ScenarioInput())

    assert len(result.series) == 33
    assert result.series[0].balance == 10000
    assert result.finalValue == run().finalValue
