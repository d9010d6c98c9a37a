import pytest

from analysis.rates import RateTotals, compute_rates, counter_delta
from conftest import make_snapshot
from models import COUNTER_MASK


def test_rate_divides_by_interval():
    previous = make_snapshot(("eth0", 1000, 500))
    current = make_snapshot(("eth0", 3000, 1500))
    totals = compute_rates(previous, current, 2)
    assert (totals.rx_rate, totals.tx_rate) == (1000, 500)
    assert totals.matched == 1


def test_rates_are_summed_across_interfaces():
    previous = make_snapshot(("eth0", 0, 0), ("wlan0", 100, 100))
    current = make_snapshot(("wlan0", 400, 200), ("eth0", 1000, 2000))
    totals = compute_rates(previous, current, 1)
    assert totals == RateTotals(rx_rate=1300, tx_rate=2100, matched=2)


def test_new_interface_contributes_zero():
    previous = make_snapshot(("eth0", 1000, 1000))
    current = make_snapshot(("eth0", 2000, 1500), ("wlan0", 10 ** 9, 10 ** 9))
    totals = compute_rates(previous, current, 1)
    assert (totals.rx_rate, totals.tx_rate) == (1000, 500)
    assert totals.matched == 1


def test_vanished_interface_is_ignored():
    previous = make_snapshot(("eth0", 1000, 1000), ("wlan0", 5, 5))
    current = make_snapshot(("eth0", 1000, 1000))
    assert compute_rates(previous, current, 1) == RateTotals(0, 0, 1)


def test_integer_division_truncates():
    previous = make_snapshot(("eth0", 0, 0))
    current = make_snapshot(("eth0", 5, 3))
    totals = compute_rates(previous, current, 2)
    assert (totals.rx_rate, totals.tx_rate) == (2, 1)


def test_counter_reset_underflows_instead_of_failing():
    previous = make_snapshot(("eth0", 5000, 10))
    current = make_snapshot(("eth0", 1000, 20))
    totals = compute_rates(previous, current, 1)
    assert totals.rx_rate == COUNTER_MASK - 3999
    assert totals.tx_rate == 10


def test_counter_delta_wraps():
    assert counter_delta(10, 4) == 6
    assert counter_delta(0, 1) == COUNTER_MASK


def test_empty_previous_yields_zero():
    totals = compute_rates(make_snapshot(), make_snapshot(("eth0", 1, 1)), 1)
    assert totals == RateTotals()


def test_interval_below_one_is_rejected():
    with pytest.raises(ValueError):
        compute_rates(make_snapshot(), make_snapshot(), 0)


def test_to_dict():
    assert RateTotals(1, 2, 3).to_dict() == {"rx_rate": 1, "tx_rate": 2, "matched": 3}


def test_summed_totals_wrap_at_64_bits():
    previous = make_snapshot(("eth0", 1, 1), ("wlan0", 1, 0))
    current = make_snapshot(("eth0", 0, 0), ("wlan0", 0, 0))
    totals = compute_rates(previous, current, 1)
    assert totals.rx_rate == COUNTER_MASK - 1
    assert totals.tx_rate == COUNTER_MASK
    assert totals.matched == 2
