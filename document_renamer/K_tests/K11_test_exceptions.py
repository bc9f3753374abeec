# document_renamer/K_tests/K11_test_exceptions.py
"""
Tests for A_core.A02_exceptions module.
"""

from __future__ import annotations

import pytest

from A_core.A02_exceptions import (
    ConfigurationError,
    FileRenameError,
    NoDateFoundError,
    RenamerError,
)


class TestHierarchy:
    @pytest.mark.parametrize("exc_type", [ConfigurationError, NoDateFoundError, FileRenameError])
    def test_subclasses(self, exc_type):
        assert issubclass(exc_type, RenamerError)
        assert issubclass(exc_type, Exception)


class TestFormatting:
    def test_plain_message(self):
        assert str(RenamerError("boom")) == "boom"

    def test_context_appended(self):
        error = RenamerError("boom", {"a": 1, "b": "x"})
        assert str(error) == "boom [a=1, b=x]"

    def test_configuration_error(self):
        error = ConfigurationError("bad value", config_key="century_pivot", expected_type="int", actual_value=150)
        assert error.context == {"key": "century_pivot", "expected": "int", "actual": "150"}
        assert error.config_key == "century_pivot"

    def test_no_date_default_message(self):
        error = NoDateFoundError(input_text="no date here")
        assert error.message == "no date found"
        assert str(error) == "no date found [input=no date here]"

    def test_no_date_input_truncated(self):
        error = NoDateFoundError(input_text="x" * 150)
        assert error.context["input"] == "x" * 100 + "..."
        assert error.input_text == "x" * 150

    def test_file_rename_error(self):
        error = FileRenameError("Target already exists", file_path="a.pdf", target_path="b.pdf")
        assert str(error) == "Target already exists [file=a.pdf, target=b.pdf]"
