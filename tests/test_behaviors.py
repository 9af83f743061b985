"""Behaviour-layer stories: pure domain function tests."""

from __future__ import annotations

import pytest

from hello_emitter.domain import behaviors


@pytest.mark.os_agnostic
def test_build_message_returns_the_twelve_byte_greeting() -> None:
    assert behaviors.build_message() == b"Hello World!"
    assert len(behaviors.build_message()) == 12


@pytest.mark.os_agnostic
def test_message_has_no_trailing_newline() -> None:
    assert not behaviors.MESSAGE.endswith(b"\n")


@pytest.mark.os_agnostic
def test_message_is_plain_ascii() -> None:
    assert behaviors.MESSAGE.decode("ascii") == "Hello World!"


@pytest.mark.os_agnostic
def test_assess_write_reports_complete_when_all_bytes_accepted() -> None:
    report = behaviors.assess_write(12)

    assert report.complete is True
    assert report.missing == 0


@pytest.mark.os_agnostic
@pytest.mark.parametrize("written", [0, 1, 11])
def test_assess_write_reports_incomplete_on_short_count(written: int) -> None:
    report = behaviors.assess_write(written)

    assert report.complete is False
    assert report.missing == 12 - written


@pytest.mark.os_agnostic
def test_assess_write_measures_against_given_data() -> None:
    report = behaviors.assess_write(3, b"abc")

    assert report == behaviors.WriteReport(written=3, expected=3)


@pytest.mark.os_agnostic
def test_write_report_is_immutable() -> None:
    report = behaviors.WriteReport(written=1, expected=12)

    with pytest.raises(AttributeError):
        report.written = 12  # type: ignore[misc]
