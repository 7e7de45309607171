"""
Tests for the command-line interface.
"""

from ..cli import main


class TestSimulate:
    """Tests for `tabletop simulate`."""

    def test_simulate_runs(self, capsys):
        assert main(["simulate", "--players", "3", "--seed", "1", "--max-turns", "6"]) == 0

        out = capsys.readouterr().out
        assert "after 6 turns" in out
        assert "Player 3" in out

    def test_simulate_bad_player_count(self, capsys):
        assert main(["simulate", "--players", "5"]) == 1
        assert "Error" in capsys.readouterr().out


class TestAdvise:
    """Tests for `tabletop advise` argument checking."""

    def test_bad_flags(self, capsys):
        assert main(["advise", "--dice", "7", "--open", "1111"]) == 1
        assert "nine" in capsys.readouterr().out

    def test_bad_dice(self, capsys):
        assert main(["advise", "--dice", "13"]) == 1


def test_no_command(capsys):
    assert main([]) == 1
