"""Unit tests for ConfigProperties (log-and-continue accessor).

Every getter returns a value of the requested type. Missing keys and invalid
numbers are logged at ERROR level instead of raised.
"""

from __future__ import annotations

import logging
from enum import Enum

import pytest

from propconf import ConfigLoadError, ConfigProperties, IllegalEnumValueError, RawStore

LOGGER_NAME = "tests.accessor"


class Colour(Enum):
    A = "a"
    B = "b"
    C = "c"


@pytest.fixture
def props(sample_file) -> ConfigProperties:
    return ConfigProperties.load(sample_file, logging.getLogger(LOGGER_NAME))


def error_messages(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]


class TestConstruction:
    def test_file_name(self, props, sample_file):
        assert props.file_name == str(sample_file)

    def test_accepts_loaded_store(self):
        store = RawStore.from_mapping({"k": "v"}, "inline")
        props = ConfigProperties(store)

        assert props.store is store
        assert props.get_string("k") == "v"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigLoadError):
            ConfigProperties(tmp_path / "nope.properties")

    def test_defaults_to_module_logger(self, caplog):
        props = ConfigProperties(RawStore.from_mapping({}, "inline"))

        with caplog.at_level(logging.ERROR):
            props.get_string("missing")

        assert caplog.records[0].name == "propconf.accessor"

    def test_logs_to_supplied_logger(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            props.get_string("missing")

        assert caplog.records[0].name == LOGGER_NAME


class TestGetString:
    def test_present(self, props):
        assert props.get_string("app.name") == "Batch Loader"

    def test_missing_logged_and_none(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_string("missing.key") is None

        messages = error_messages(caplog)
        assert len(messages) == 1
        assert "missing.key" in messages[0]
        assert props.file_name in messages[0]

    def test_upper(self, props):
        assert props.get_string_upper("app.mode") == "FAST"

    def test_upper_missing_does_not_fault(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_string_upper("missing.key") is None

        assert len(error_messages(caplog)) == 1


class TestGetInt:
    def test_digits(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_int("batch.size") == 42

        assert error_messages(caplog) == []

    def test_missing_returns_zero(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_int("missing.key") == 0

        messages = error_messages(caplog)
        assert len(messages) == 1
        assert "not found" in messages[0]

    def test_not_numeric_returns_zero(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_int("batch.bad") == 0

        messages = error_messages(caplog)
        assert len(messages) == 1
        assert "[notanumber]" in messages[0]
        assert "not an integer" in messages[0]
        assert props.file_name in messages[0]

    def test_negative_is_not_numeric(self, props):
        assert props.get_int("batch.negative") == 0

    def test_overflow_returns_zero(self, props, caplog):
        """Digits that do not fit in 32 bits are treated as invalid."""
        with caplog.at_level(logging.ERROR):
            assert props.get_int("batch.big") == 0

        assert "[99999999999]" in error_messages(caplog)[0]


class TestGetInteger:
    def test_digits(self, props):
        assert props.get_integer("batch.size") == 42

    def test_blank_returns_none_without_logging(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_integer("batch.blank") is None

        assert error_messages(caplog) == []

    def test_whitespace_only_is_blank(self, caplog):
        props = ConfigProperties(RawStore.from_mapping({"spaces": "   "}))

        with caplog.at_level(logging.ERROR):
            assert props.get_integer("spaces") is None

        assert error_messages(caplog) == []

    def test_missing_returns_none(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_integer("missing.key") is None

        assert len(error_messages(caplog)) == 1

    def test_not_numeric_returns_none(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_integer("batch.bad") is None

        assert "[notanumber]" in error_messages(caplog)[0]


class TestGetLong:
    def test_beyond_int_range(self, props):
        assert props.get_long("batch.big") == 99999999999

    def test_overflow_returns_zero(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_long("batch.huge") == 0

        assert len(error_messages(caplog)) == 1

    def test_missing_returns_zero(self, props):
        assert props.get_long("missing.key") == 0

    def test_not_numeric_returns_zero(self, props):
        assert props.get_long("batch.bad") == 0


class TestGetBool:
    """Test the flag/default combinations of get_bool."""

    def test_default_flag_is_y(self, props):
        assert props.get_bool("feature.on") is True
        assert props.get_bool("feature.lower") is True
        assert props.get_bool("feature.off") is False

    def test_custom_flag(self, props):
        assert props.get_bool("feature.true", "true") is True
        assert props.get_bool("feature.on", "TRUE") is False

    def test_missing_without_default_logs_and_returns_false(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_bool("missing.key") is False
            assert props.get_bool("missing.key", "TRUE") is False

        assert len(error_messages(caplog)) == 2

    def test_missing_with_default_returns_default_silently(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_bool("missing.key", "Y", True) is True
            assert props.get_bool("missing.key", "Y", default=False) is False

        assert error_messages(caplog) == []

    def test_default_ignored_when_present(self, props):
        assert props.get_bool("feature.off", "Y", default=True) is False

    def test_whitespace_not_trimmed(self):
        props = ConfigProperties(RawStore.from_mapping({"padded": " Y"}))

        assert props.get_bool("padded") is False


class TestGetEnumSet:
    def test_converts_all_tokens(self, props):
        assert props.get_enum_set(Colour, "colours") == {Colour.A, Colour.B, Colour.C}

    def test_missing_logs_and_returns_empty(self, props, caplog):
        with caplog.at_level(logging.ERROR):
            assert props.get_enum_set(Colour, "missing.key") == frozenset()

        assert len(error_messages(caplog)) == 1

    def test_illegal_token_raises(self, props):
        with pytest.raises(IllegalEnumValueError) as exc_info:
            props.get_enum_set(Colour, "colours.bad")

        err = exc_info.value
        assert err.key == "colours.bad"
        assert err.token == "X"
        assert err.source == props.file_name
        assert isinstance(err, ValueError)

    def test_custom_converter(self):
        props = ConfigProperties(RawStore.from_mapping({"ports": "80, 443"}))

        assert props.get_enum_set(int, "ports") == {80, 443}
