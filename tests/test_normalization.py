from __future__ import annotations

import logging
import math

import pytest

from pynpf.config import NpfConfig
from pynpf.exceptions import NpfConfigError, UnknownFieldError
from pynpf.ingestion.apply import canonical_field_name, parse_update
from pynpf.ingestion.normalize import is_nan, parse_float, parse_int, to_enum
from pynpf.models.camera import SensorSize, TrailType
from pynpf.state.events import SetFNumber, SetPixelWidth, SetSensorSize, SetTrailType


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("42", 42), ("  42", 42), ("+7", 7), ("-12", -12), ("12abc", 12), ("3.7", 3), ("007", 7)],
)
def test_parse_int_reads_leading_integer(raw: str, expected: int) -> None:
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "   ", "-", "x12", ".5", "٣"])
def test_parse_int_without_digits_is_nan(raw: str) -> None:
    assert is_nan(parse_int(raw))


@pytest.mark.parametrize(("sign", "expected"), [("", math.inf), ("+", math.inf), ("-", -math.inf)])
def test_parse_int_digit_run_too_long_for_int_is_infinite(sign: str, expected: float) -> None:
    assert parse_int(" " + sign + "9" * 5000 + "px") == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2.8", 2.8),
        (" 1.4", 1.4),
        ("2.8f", 2.8),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e1", 10.0),
        ("1e", 1.0),
        ("-0.7", -0.7),
    ],
)
def test_parse_float_reads_leading_number(raw: str, expected: float) -> None:
    assert parse_float(raw) == expected


def test_parse_float_accepts_infinity() -> None:
    assert parse_float("Infinity") == math.inf
    assert parse_float("-Infinity") == -math.inf


@pytest.mark.parametrize("raw", ["", "f/2.8", "nan", "inf", "."])
def test_parse_float_without_number_is_nan(raw: str) -> None:
    assert is_nan(parse_float(raw))


def test_to_enum_known_and_unknown_values() -> None:
    assert to_enum(SensorSize, "apsc-c") is SensorSize.APSC_CANON
    assert to_enum(TrailType, "huge") == "huge"


def test_is_nan_only_for_float_nan() -> None:
    assert is_nan(math.nan)
    assert not is_nan(1.0)
    assert not is_nan("NaN")


class TestParseUpdate:
    def test_builds_typed_commands(self) -> None:
        assert parse_update("sensorSize", "full") == SetSensorSize(value=SensorSize.FULL)
        assert parse_update("pixelWidth", "5000") == SetPixelWidth(value=5000)
        assert parse_update("fNumber", "4") == SetFNumber(value=4.0)
        assert parse_update("trailType", "slight") == SetTrailType(value=TrailType.SLIGHT)

    def test_discriminator_matches_field_name(self) -> None:
        command = parse_update("focal_length", "35")
        assert command.field == "focalLength"
        assert command.value == 35

    def test_invalid_numbers_still_produce_a_command(self) -> None:
        command = parse_update("pixelWidth", "wide")
        assert isinstance(command, SetPixelWidth)
        assert is_nan(command.value)

    def test_unknown_field(self) -> None:
        with pytest.raises(UnknownFieldError) as excinfo:
            parse_update("shutter", "30")
        assert excinfo.value.field_name == "shutter"
        assert "shutter" in str(excinfo.value)

    def test_unknown_field_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            canonical_field_name("SensorSize")


class TestConfig:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("NPF_DECLINATION", "NPF_LOG_LEVEL", "NPF_LOG_SNAPSHOTS"):
            monkeypatch.delenv(key, raising=False)

    def test_defaults(self) -> None:
        config = NpfConfig.from_env()
        assert config.declination == 0.0
        assert config.log_level == logging.WARNING
        assert config.log_snapshots is True

    def test_values_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NPF_DECLINATION", "45")
        monkeypatch.setenv("NPF_LOG_LEVEL", "debug")
        monkeypatch.setenv("NPF_LOG_SNAPSHOTS", "off")

        config = NpfConfig.from_env()

        assert config.declination == 45.0
        assert config.log_level == logging.DEBUG
        assert config.log_snapshots is False

    def test_overrides_win_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NPF_DECLINATION", "45")

        config = NpfConfig.from_env(declination=-30.0)

        assert config.declination == -30.0

    def test_unparsable_declination(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NPF_DECLINATION", "north")
        with pytest.raises(NpfConfigError):
            NpfConfig.from_env()

    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NPF_LOG_LEVEL", "loud")
        with pytest.raises(NpfConfigError):
            NpfConfig.from_env()

    def test_declination_out_of_range(self) -> None:
        with pytest.raises(NpfConfigError):
            NpfConfig(declination=120.0)
