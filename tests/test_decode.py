from __future__ import annotations

import time

import pytest

from pyclimate.exceptions import DecodeError, MalformedLineError, NumericParseError
from pyclimate.ingestion.decode import decode_line, split_fields


def _line(*fields: object) -> str:
    return "\t".join(str(f) for f in fields) + "\n"


SAMPLE = "CA\t1428300000000\t9prcjqk3yc80\t93.0\t0.0\t100.0\t0.0\t95644.0\t277.58716\n"


def test_decodes_all_fields_in_order() -> None:
    obs = decode_line(SAMPLE)

    assert obs.code == "CA"
    assert obs.timestamp == 1_428_300_000
    assert obs.humidity == 93.0
    assert obs.snow == 0
    assert obs.cloud_cover == 100.0
    assert obs.lightning == 0
    assert obs.pressure == 95644.0
    assert obs.temperature == pytest.approx(277.58716 * 1.8 - 459.67)


@pytest.mark.parametrize("kelvin", [0.0, 255.372, 273.15, 283.15, 300.0, 310.9])
def test_temperature_is_converted_to_fahrenheit(kelvin: float) -> None:
    obs = decode_line(_line("TN", 1000, "geo", 50.0, 0, 30.0, 0, 100000, kelvin))

    assert obs.temperature == pytest.approx(kelvin * 1.8 - 459.67)


def test_timestamp_truncates_milliseconds() -> None:
    obs = decode_line(_line("TN", 1_438_599_600_999, "geo", 50.0, 0, 30.0, 0, 100000, 283.15))

    assert obs.timestamp == 1_438_599_600


def test_negative_timestamp_truncates_toward_zero() -> None:
    obs = decode_line(_line("TN", -1500, "geo", 50.0, 0, 30.0, 0, 100000, 283.15))

    assert obs.timestamp == -1


def test_flags_keep_raw_integer_values() -> None:
    obs = decode_line(_line("TN", 1000, "geo", 50.0, 2, 30.0, "1.0", 100000, 283.15))

    assert obs.snow == 2
    assert obs.lightning == 1


def test_line_without_trailing_newline() -> None:
    obs = decode_line(SAMPLE.rstrip("\n"))

    assert obs.temperature == pytest.approx(277.58716 * 1.8 - 459.67)


def test_crlf_terminator_is_stripped() -> None:
    obs = decode_line(SAMPLE.replace("\n", "\r\n"))

    assert obs.temperature == pytest.approx(277.58716 * 1.8 - 459.67)


def test_extra_fields_are_ignored() -> None:
    obs = decode_line(SAMPLE.rstrip("\n") + "\textra\n")

    assert obs.code == "CA"


def test_state_code_is_copied_verbatim() -> None:
    obs = decode_line(_line("tn", 1000, "geo", 50.0, 0, 30.0, 0, 100000, 283.15))

    assert obs.code == "tn"


def test_too_few_fields_is_malformed() -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        decode_line(_line("TN", 1000, "geo", 50.0, 0, 30.0, 0), line_number=7, source="data_tn.tdv")

    assert excinfo.value.line_number == 7
    assert excinfo.value.source == "data_tn.tdv"
    assert str(excinfo.value).startswith("data_tn.tdv:7:")


def test_empty_line_is_malformed() -> None:
    with pytest.raises(MalformedLineError):
        decode_line("\n")


def test_empty_state_code_is_malformed() -> None:
    with pytest.raises(MalformedLineError):
        decode_line(_line("", 1000, "geo", 50.0, 0, 30.0, 0, 100000, 283.15))


@pytest.mark.parametrize(
    ("index", "field"),
    [
        (1, "timestamp"),
        (3, "humidity"),
        (4, "snow"),
        (5, "cloud_cover"),
        (6, "lightning"),
        (7, "pressure"),
        (8, "temperature"),
    ],
)
def test_non_numeric_field_names_the_field(index: int, field: str) -> None:
    fields: list[object] = ["TN", 1000, "geo", 50.0, 0, 30.0, 0, 100000, 283.15]
    fields[index] = "abc"

    with pytest.raises(NumericParseError) as excinfo:
        decode_line(_line(*fields))

    assert excinfo.value.field == field
    assert isinstance(excinfo.value, DecodeError)


@pytest.mark.parametrize("value", ["nan", "inf", "-inf", ""])
def test_non_finite_or_empty_temperature_rejected(value: str) -> None:
    with pytest.raises(NumericParseError):
        decode_line(_line("TN", 1000, "geo", 50.0, 0, 30.0, 0, 100000, value))


def test_split_fields_preserves_empty_fields() -> None:
    assert split_fields("a\t\tb\n") == ["a", "", "b"]


def test_huge_exponent_flag_is_rejected_quickly() -> None:
    started = time.perf_counter()

    with pytest.raises(NumericParseError) as excinfo:
        decode_line("TN\t1000\tgeo\t50\t1e2000000\t30\t0\t1\t280\n")

    assert excinfo.value.field == "snow"
    assert time.perf_counter() - started < 0.5


@pytest.mark.parametrize("value", ["1_000", "١٢"])
def test_non_ascii_or_underscored_numbers_rejected(value: str) -> None:
    with pytest.raises(NumericParseError):
        decode_line(_line("TN", 1000, "geo", value, 0, 30.0, 0, 100000, 283.15))


def test_undecodable_bytes_make_line_malformed() -> None:
    line = b"T\xffN\t1000\tgeo\t50\t0\t30\t0\t1\t280\n".decode("utf-8", errors="surrogateescape")

    with pytest.raises(MalformedLineError):
        decode_line(line)
