import math
import random

import pytest

from randdists.exponential import inv_exp
from randdists.hypexp import (
    HypExpParams,
    generate_3p_sample,
    main,
    parse_config_file,
)


class _SequenceRng:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


CONFIG = (
    "# comment\n"
    "ep_1 0.25\n"
    "ep_2\t0.5\n"
    "\n"
    "lambda_1 1.5\n"
    "lambda_2 2.5\n"
    "lambda_3 3.5\n"
    "sample_size 100\n"
    "bogus 7\n"
)


@pytest.mark.parametrize(
    "keyword", ["ep_1", "ep_2", "lambda_1", "lambda_2", "lambda_3", "sample_size"]
)
def test_set_from_line_sets_each_keyword(keyword):
    params = HypExpParams()
    params.set_from_line([keyword, "0.75"])
    assert getattr(params, keyword) == 0.75


def test_set_from_line_unknown_keyword():
    with pytest.raises(ValueError):
        HypExpParams().set_from_line(["lambda_9", "1.0"])


def test_set_from_line_missing_value():
    with pytest.raises(ValueError):
        HypExpParams().set_from_line(["ep_1"])


def test_parse_config_file(tmp_path, capsys):
    path = tmp_path / "model.conf"
    path.write_text(CONFIG, encoding="utf-8")
    params = parse_config_file(path)
    assert params == HypExpParams(0.25, 0.5, 1.5, 2.5, 3.5, 100.0)
    assert "bad param at line number 9" in capsys.readouterr().err


def test_parse_missing_file(tmp_path):
    with pytest.raises(OSError):
        parse_config_file(tmp_path / "absent.conf")


def test_two_phase_first_branch():
    params = HypExpParams(ep_1=0.5, lambda_1=2.0, lambda_2=5.0)
    value = generate_3p_sample(params, _SequenceRng([0.2, 0.6]))
    assert value == pytest.approx(inv_exp(0.6, 2.0))


def test_two_phase_second_branch():
    params = HypExpParams(ep_1=0.5, lambda_1=2.0, lambda_2=5.0)
    value = generate_3p_sample(params, _SequenceRng([0.7, 0.6]))
    assert value == pytest.approx(inv_exp(0.6, 5.0))


@pytest.mark.parametrize("r1, lam", [(0.1, 1.0), (0.4, 2.0), (0.9, 4.0)])
def test_three_phase_branches(r1, lam):
    params = HypExpParams(ep_1=0.2, ep_2=0.3, lambda_1=1.0, lambda_2=2.0, lambda_3=4.0)
    value = generate_3p_sample(params, _SequenceRng([r1, 0.6]))
    assert value == pytest.approx(inv_exp(0.6, lam))


def test_generate_does_not_modify_params():
    params = HypExpParams(ep_1=0.5, lambda_1=2.0, lambda_2=5.0)
    generate_3p_sample(params, _SequenceRng([0.2, 0.6]))
    assert params.ep_2 == 0.0


def test_empty_model_raises():
    with pytest.raises(ValueError):
        generate_3p_sample(HypExpParams(), random.Random(1))


def test_negative_lambda1_raises():
    params = HypExpParams(ep_1=0.5, lambda_1=-1.0, lambda_2=1.0)
    with pytest.raises(ValueError, match="lambda1"):
        generate_3p_sample(params, random.Random(1))


def test_negative_lambda2_raises():
    params = HypExpParams(ep_1=0.5, lambda_1=1.0, lambda_2=-1.0)
    with pytest.raises(ValueError, match="lambda2"):
        generate_3p_sample(params, random.Random(1))


@pytest.mark.parametrize("ep_1, ep_2", [(0.7, 0.6), (-0.1, 0.2), (1.5, 0.0)])
def test_invalid_probabilities_raise(ep_1, ep_2):
    params = HypExpParams(ep_1=ep_1, ep_2=ep_2, lambda_1=1.0, lambda_2=1.0)
    with pytest.raises(ValueError, match="probabilities"):
        generate_3p_sample(params, random.Random(1))


def test_samples_are_nonnegative():
    params = HypExpParams(ep_1=0.2, ep_2=0.3, lambda_1=1.0, lambda_2=2.0, lambda_3=4.0)
    rng = random.Random(42)
    samples = [generate_3p_sample(params, rng) for _ in range(500)]
    assert all(sample >= 0 and math.isfinite(sample) for sample in samples)


def test_main_seeded_is_reproducible(tmp_path, capsys):
    path = tmp_path / "model.conf"
    path.write_text(CONFIG, encoding="utf-8")
    assert main(["-f", str(path), "-C", "3", "-S", "7"]) == 0
    first = capsys.readouterr().out
    assert main(["-f", str(path), "-C", "3", "-S", "7"]) == 0
    second = capsys.readouterr().out
    assert first == second
    assert len(first.splitlines()) == 3


def test_main_empty_model_prints_sentinel(tmp_path, capsys):
    path = tmp_path / "empty.conf"
    path.write_text("", encoding="utf-8")
    assert main(["-f", str(path), "-C", "2", "-S", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["-1.000000", "-1.000000"]


def test_main_requires_file(capsys):
    assert main(["-C", "3"]) == 1
    assert "must specify paramfile name" in capsys.readouterr().err


def test_main_requires_count(tmp_path, capsys):
    path = tmp_path / "model.conf"
    path.write_text(CONFIG, encoding="utf-8")
    assert main(["-f", str(path)]) == 1
    assert "must specify sample count" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "absent.conf"), "-C", "2"]) == 1
    assert "error parsing paramfile" in capsys.readouterr().err