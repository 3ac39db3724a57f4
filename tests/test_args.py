from pathlib import Path

import pytest

from oxide_wdns.args import (
    DEFAULT_CONFIG_PATH,
    CliArgs,
    build_parser,
    parse_args,
)


def test_defaults():
    args = parse_args([])
    assert args.config == Path(DEFAULT_CONFIG_PATH)
    assert args.test_config is False
    assert args.debug is False


@pytest.mark.parametrize("flag", ["-c", "--config"])
def test_config_option(flag):
    args = parse_args([flag, "/etc/owdns/server.yaml"])
    assert args.config == Path("/etc/owdns/server.yaml")


@pytest.mark.parametrize("flag", ["-t", "--test"])
def test_test_flag(flag):
    args = parse_args([flag])
    assert args.test_config is True
    assert args.debug is False


@pytest.mark.parametrize("flag", ["-d", "--debug"])
def test_debug_flag(flag):
    args = parse_args([flag])
    assert args.debug is True
    assert args.test_config is False


def test_combined_short_flags():
    args = parse_args(["-td", "-c", "x.yaml"])
    assert args.test_config is True
    assert args.debug is True
    assert args.config == Path("x.yaml")


def test_unknown_argument_rejected():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--nope"])
    assert excinfo.value.code == 2


def test_version_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--version"])
    assert excinfo.value.code == 0
    assert "oxide-wdns" in capsys.readouterr().out


def test_parser_prog_name():
    assert build_parser().prog == "oxide-wdns"


def test_validate_existing_file(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("server: {}\n")
    args = parse_args(["-c", str(config)])
    assert args.validate() is None
    assert args.config == config


def test_validate_missing_file(tmp_path):
    missing = tmp_path / "absent.yaml"
    args = CliArgs(config=missing)
    with pytest.raises(FileNotFoundError) as excinfo:
        args.validate()
    assert "Configuration file does not exist" in str(excinfo.value)
    assert str(missing) in str(excinfo.value)


def test_config_string_is_coerced_to_path():
    args = CliArgs(config="some/file.yaml")
    assert args.config == Path("some/file.yaml")