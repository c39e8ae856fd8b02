import pytest

from randdists.normal import normal_cdf
from randdists.normal_prob import main


def test_default_value_is_median(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "0.500000\n"


def test_value_at_shifted_mean(capsys):
    assert main(["-m", "1", "-s", "2", "-v", "1"]) == 0
    assert capsys.readouterr().out.strip() == "0.500000"


def test_value_matches_cdf(capsys):
    assert main(["-v", "1.96"]) == 0
    printed = float(capsys.readouterr().out)
    assert printed == pytest.approx(normal_cdf(1.96, 0.0, 1.0), abs=1e-6)


def test_result_grows_with_value(capsys):
    main(["-v", "-1"])
    low = float(capsys.readouterr().out)
    main(["-v", "1"])
    high = float(capsys.readouterr().out)
    assert low < high
    assert low + high == pytest.approx(1.0, abs=1e-6)


def test_unknown_option(capsys):
    assert main(["-q", "3"]) == 1
    err = capsys.readouterr().err
    assert "usage:" in err