from GammaScripts.gains import GainTriple
from GammaScripts.logger import Logger


def test_console_levels(capsys):
    logger = Logger()
    logger.log("Screen 0: temperature ~ 6500")
    logger.debug("hidden")
    logger.warning("careful")
    logger.error("broken")
    captured = capsys.readouterr()
    assert captured.out == "Screen 0: temperature ~ 6500\n"
    assert captured.err == "WARNING! careful\nERROR! broken\n"


def test_verbose_debug(capsys):
    Logger(verbose=True).debug("Gamma: 1, 1, 1")
    assert capsys.readouterr().err == "DEBUG: Gamma: 1, 1, 1\n"


def test_log_file_appends_with_single_header(tmp_path):
    path = tmp_path / "ramps.csv"
    for _ in range(2):
        logger = Logger()
        logger.open_log_file(str(path))
        logger.log_ramp_data([(0, 1, 256, GainTriple(1.0, 0.5, 0.25))])
        logger.close_log_file()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "timestamp,screen,crtc,size,red,green,blue"
    assert len(lines) == 3
    assert lines[2].endswith(",0,1,256,1.000000,0.500000,0.250000")


def test_without_log_file_nothing_written(tmp_path):
    logger = Logger()
    logger.log_ramp_data([(0, 0, 256, GainTriple(1.0, 1.0, 1.0))])
    logger.close_log_file()
    assert list(tmp_path.iterdir()) == []


def test_unwritable_log_file_warns(tmp_path, capsys):
    logger = Logger()
    logger.open_log_file(str(tmp_path / "missing" / "ramps.csv"))
    assert logger.log_file is None
    assert "WARNING! Could not open log file" in capsys.readouterr().err
