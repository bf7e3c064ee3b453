"""
Unit tests for the command-line interface.
"""

import io

import pytest
from rich.console import Console

from propgen_kit.cli import create_cli_parser, main
from propgen_kit.config import GeneratorConfig, set_config
from propgen_kit.core.arbitrary import ARBITRARY_NAT
from propgen_kit.services.replay_service import ReplayService
from propgen_kit.utilities.formatters import format_word


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def _output(console: Console) -> str:
    return console.file.getvalue()


class TestArgumentParser:
    """Test cases for argument parsing."""

    def test_sample_defaults(self):
        args = create_cli_parser().parse_args(["sample"])
        assert args.type == "int"
        assert args.seed is None
        assert args.max_size is None

    def test_replay_accepts_hex_seed(self):
        args = create_cli_parser().parse_args(["replay", "0x2a", "LR", "--type", "nat"])
        assert args.seed == 42
        assert args.path == "LR"
        assert args.type == "nat"

    def test_unknown_type_rejected(self):
        with pytest.raises(SystemExit):
            create_cli_parser().parse_args(["sample", "--type", "float"])


class TestCommands:
    """Test cases for command execution."""

    def test_sample_lists_every_size(self, console):
        assert main(["sample", "--seed", "7", "--max-size", "3", "--type", "nat"], console) == 0
        output = _output(console)
        assert "nat samples, seed 7" in output
        for path in ("L", "RL", "RRL", "RRRL"):
            assert path in output

    def test_replay_prints_value_and_word(self, console):
        assert main(["replay", "7", "RRL", "--type", "nat", "--size", "5"], console) == 0
        service = ReplayService(7)
        expected = service.replay(ARBITRARY_NAT.arbitrary(), 5, "RRL")
        output = _output(console)
        assert format_word(service.word_at("RRL")) in output
        assert repr(expected) in output

    def test_sample_uses_configured_seed(self, console):
        set_config(GeneratorConfig(seed=11, max_size=1))
        assert main(["sample"], console) == 0
        assert "int samples, seed 11" in _output(console)

    def test_invalid_path_reports_error(self, console):
        assert main(["replay", "7", "LXR"], console) == 1
        assert "Error:" in _output(console)

    def test_negative_max_size_reports_error(self, console):
        assert main(["sample", "--seed", "1", "--max-size", "-1"], console) == 1

    def test_no_command_prints_help(self, console, capsys):
        assert main([], console) == 0
        assert "propgen" in capsys.readouterr().out
