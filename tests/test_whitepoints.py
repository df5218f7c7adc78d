import numpy as np
import pytest

from GammaScripts.gains import GainTriple
from GammaScripts.whitepoints import WHITEPOINTS, in_table_range, table_gains


def test_table_has_successor_for_last_temperature():
    # 1000K..10000K in 500K steps plus the 10500K successor
    assert len(WHITEPOINTS) == 20


def test_neutral_is_unity():
    assert table_gains(6500) == GainTriple(1.0, 1.0, 1.0)


def test_first_entry_verbatim():
    assert table_gains(1000) == WHITEPOINTS[0]


def test_multiples_of_step_return_entries():
    assert table_gains(1500) == WHITEPOINTS[1]
    assert table_gains(10000) == WHITEPOINTS[18]


def test_interpolates_between_entries():
    gains = table_gains(1250)
    assert gains.red == pytest.approx(1.0)
    assert gains.green == pytest.approx((0.18172716 + 0.42322816) / 2)
    assert gains.green == pytest.approx(0.30247, abs=1e-5)
    assert gains.blue == pytest.approx(0.0)


def test_quarter_step():
    gains = table_gains(6625)
    assert gains.red == pytest.approx(0.75 * 1.0 + 0.25 * 0.95160805)
    assert gains.blue == pytest.approx(1.0)


@pytest.mark.parametrize("temp", [0, 999, 10001, 20000, -5])
def test_out_of_range_falls_back_to_neutral(temp):
    assert not in_table_range(temp)
    assert table_gains(temp) == GainTriple(1.0, 1.0, 1.0)


def test_non_integer_falls_back_to_neutral():
    assert table_gains("3000") == GainTriple(1.0, 1.0, 1.0)


def test_gains_are_monotonic_warm_to_cool():
    warm = [table_gains(t) for t in range(1000, 6501, 100)]
    assert all(g.red == pytest.approx(1.0) for g in warm)
    greens = [g.green for g in warm]
    assert greens == sorted(greens)


def test_numpy_integers_are_accepted():
    assert in_table_range(np.int64(3000))
    assert table_gains(np.int64(3000)) == table_gains(3000)
    assert table_gains(np.int32(1250)) == pytest.approx(tuple(table_gains(1250)))


def test_float_falls_back_to_neutral():
    assert table_gains(3000.0) == GainTriple(1.0, 1.0, 1.0)
