"""
Tests for the command-line front end.
"""

import pytest

from formatkit.main import main


@pytest.fixture(autouse=True)
def _logging(restore_root_logging):
    return restore_root_logging


class TestCli:
    """Sub-commands print one formatted line"""

    @pytest.mark.parametrize(
        "argv, expected",
        [
            (["date", "2023-04-15T14:30:05", "Y-m-d H:i:s"], "2023-04-15 14:30:05"),
            (["date", "1681569005000", "[at] H:i"], "at 14:30"),
            (["currency", "1234.5678"], "1234.56"),
            (["currency", "abc"], "0.00"),
            (["pad", "5", "--length", "3"], "005"),
            (["pad", "5", "--fill", "x", "--length", "3", "--right"], "5xx"),
            (["plural", "city"], "cities"),
            (["plural", "cat", "--possessive"], "cat's"),
            (["ordinal", "22"], "22nd"),
            (["ordinal", "113"], "113th"),
        ],
    )
    def test_commands(self, argv, expected, capsys) -> None:
        assert main(argv) == 0
        assert capsys.readouterr().out == expected + "\n"

    def test_date_default_pattern(self, capsys) -> None:
        """Without a pattern the configured default is used"""
        assert main(["date", "2023-04-15T14:30:05"]) == 0
        assert capsys.readouterr().out == "15/04/2023 14:30\n"

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out
