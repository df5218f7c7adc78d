import numpy as np

from GammaScripts.analytic import analytic_gains
from GammaScripts.ramp import encode_ramp
from GammaScripts.ramp_chart import RampChart


def test_three_lines_per_ramp():
    chart = RampChart()
    assert chart.add_ramp("S0 C0", encode_ramp(analytic_gains(3000), 256))
    assert chart.add_ramp("S0 C1", encode_ramp(analytic_gains(8000), 1024))
    assert len(chart.lines) == 6
    assert chart.lines[0].get_label() == "S0 C0 R"
    assert chart.lines[3].get_linestyle() == "--"


def test_empty_ramp_skipped():
    chart = RampChart()
    assert not chart.add_ramp("S0 C0", np.zeros((3, 0), dtype=np.uint16))
    assert chart.lines == []


def test_add_display_skips_controllers_without_ramp(display):
    chart = RampChart()
    chart.add_display(display, [0, 1])
    assert len(chart.lines) == 9


def test_save(tmp_path):
    chart = RampChart()
    chart.add_ramp("S0 C0", encode_ramp(analytic_gains(4500), 256))
    path = tmp_path / "ramps.svg"
    chart.save(str(path))
    assert "<svg" in path.read_text(encoding="utf-8")
