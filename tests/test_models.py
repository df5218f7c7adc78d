import pytest

from GammaScripts.gains import GainTriple
from GammaScripts.models import MODELS, get_model
from GammaScripts.polynomial import polynomial_temperature, polynomial_value
from GammaScripts.whitepoints import table_gains


def test_polynomial_neutral():
    assert polynomial_value(GainTriple(1.0, 1.0, 1.0)) == pytest.approx(6508)
    assert polynomial_temperature(GainTriple(1.0, 1.0, 1.0)) == 6508
    assert polynomial_temperature(GainTriple(1.0, 1.0, 1.0), step=100) == 6500


@pytest.mark.parametrize("temp", [3000, 6500, 10000])
def test_polynomial_inverts_table(temp):
    assert polynomial_temperature(table_gains(temp), step=100) == temp


def test_polynomial_is_not_clamped():
    assert polynomial_temperature(GainTriple(0.0, 0.0, 0.0)) == 64465


def test_models_registered():
    assert sorted(MODELS) == ["analytic", "table"]
    assert get_model().name == "analytic"
    with pytest.raises(ValueError):
        get_model("ramp")


def test_analytic_clamps_to_floor():
    model = get_model("analytic")
    assert model.validate(6500) == (6500, None)
    assert model.validate(50000) == (50000, None)
    temp, warning = model.validate(500)
    assert temp == 700
    assert "700" in warning


@pytest.mark.parametrize("temp", [500, 999, 10001])
def test_table_resets_out_of_range(temp):
    applied, warning = get_model("table").validate(temp)
    assert applied == 6500
    assert warning


def test_table_accepts_range():
    model = get_model("table")
    assert model.validate(1000) == (1000, None)
    assert model.validate(10000) == (10000, None)


def test_estimate_without_controllers_is_floor():
    for model in MODELS.values():
        assert model.estimate(GainTriple(0.0, 0.0, 0.0), 0) == 700


def test_table_estimate_uses_mean():
    model = get_model("table")
    pooled = table_gains(3000).scaled(3)
    assert model.estimate(pooled, 3) == 3000


@pytest.mark.parametrize("name", ["analytic", "table"])
def test_neutral_round_trip(name):
    model = get_model(name)
    assert model.estimate(model.forward(6500), 1) == pytest.approx(6500, abs=1)
