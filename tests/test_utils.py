"""Tests for orgtable utility modules."""


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_name(self) -> None:
        from orgtable.utils.logger import get_logger

        assert get_logger("mymodule").name == "orgtable.mymodule"

    def test_keeps_package_names(self) -> None:
        from orgtable.utils.logger import get_logger

        assert get_logger("orgtable.editing").name == "orgtable.editing"
        assert get_logger("orgtable").name == "orgtable"

    def test_same_logger_returned(self) -> None:
        from orgtable.utils import get_logger

        assert get_logger("x") is get_logger("orgtable.x")
