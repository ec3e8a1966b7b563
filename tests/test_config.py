import pytest

from config import Config


def test_defaults():
    args = Config().parse_args([])
    assert args.host == "8.8.8.8"
    assert args.ping_timeout == 0.5
    assert args.interval == 1.0
    assert args.color is False


def test_overrides():
    args = Config().parse_args(["1.1.1.1", "-t", "2", "--interval", "0.25", "--color"])
    assert args.host == "1.1.1.1"
    assert args.ping_timeout == 2.0
    assert args.interval == 0.25
    assert args.color is True


@pytest.mark.parametrize(
    "argv",
    [["--ping-timeout", "0"], ["--ping-timeout", "11"], ["--interval", "0"], ["-i", "-1"]],
)
def test_out_of_range_values_are_rejected(argv):
    with pytest.raises(SystemExit):
        Config().parse_args(argv)
