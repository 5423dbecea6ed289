"""Tests for rulelex utility modules."""


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_name(self) -> None:
        from rulelex.utils.logger import get_logger

        assert get_logger("mymodule").name == "rulelex.mymodule"

    def test_keeps_package_names(self) -> None:
        from rulelex.utils import get_logger

        assert get_logger("rulelex").name == "rulelex"
        assert get_logger("rulelex.lexer.scanner").name == "rulelex.lexer.scanner"

    def test_same_logger_returned(self) -> None:
        from rulelex.utils import get_logger

        assert get_logger("x") is get_logger("rulelex.x")
