# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for result rendering."""

from __future__ import annotations

import pytest

from srihash.hashing import HashOutcome, HashResult
from srihash.reporting import OutputStyle, emit_results, format_result, render_result

OK_RESULT = HashResult(path="abc.txt", outcome=HashOutcome.OK, integrity="sha256-abc=")
MISSING_RESULT = HashResult(path="missing.txt", outcome=HashOutcome.NOT_FOUND, reason="does not exist")
UNREADABLE_RESULT = HashResult(path="static", outcome=HashOutcome.UNREADABLE, reason="Is a directory")


def test_format_result_lines() -> None:
    assert format_result(OK_RESULT) == "abc.txt --> sha256-abc="
    assert format_result(MISSING_RESULT) == "missing.txt --> ERROR: file does not exist"
    assert format_result(UNREADABLE_RESULT) == "static --> ERROR: unable to hash file (Is a directory)"


def test_render_without_color_has_no_styles() -> None:
    text = render_result(OK_RESULT, OutputStyle(color=False))

    assert text.plain == "abc.txt --> sha256-abc="
    assert not text.spans


def test_render_with_color_styles_path_and_outcome() -> None:
    text = render_result(MISSING_RESULT, OutputStyle(color=True))

    assert text.plain == format_result(MISSING_RESULT)
    assert {str(span.style) for span in text.spans} == {"bold", "red"}


def test_detect_honours_explicit_preference() -> None:
    assert OutputStyle.detect(color=True).color is True
    assert OutputStyle.detect(color=False, emoji=True) == OutputStyle(color=False, emoji=True)


def test_emit_results_prints_lines_and_counts(capsys: pytest.CaptureFixture[str]) -> None:
    summary = emit_results([OK_RESULT, MISSING_RESULT, UNREADABLE_RESULT], OutputStyle())

    lines = capsys.readouterr().out.splitlines()
    assert lines == [format_result(result) for result in (OK_RESULT, MISSING_RESULT, UNREADABLE_RESULT)]
    assert summary.total == 3
    assert summary.failed == ["missing.txt", "static"]
