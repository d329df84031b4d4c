# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the SRI algorithm enumeration."""

from __future__ import annotations

import hashlib

import pytest

from srihash.algorithms import HashAlgorithm, ensure_available
from srihash.constants import ExitCode
from srihash.errors import HashCapabilityError, UnknownAlgorithmError


def test_parse_accepts_case_and_dash_variants() -> None:
    assert HashAlgorithm.parse("sha256") is HashAlgorithm.SHA256
    assert HashAlgorithm.parse("SHA384") is HashAlgorithm.SHA384
    assert HashAlgorithm.parse(" sha-512 ") is HashAlgorithm.SHA512
    assert HashAlgorithm.parse(HashAlgorithm.SHA512) is HashAlgorithm.SHA512


def test_parse_rejects_non_sri_algorithms() -> None:
    with pytest.raises(UnknownAlgorithmError) as excinfo:
        HashAlgorithm.parse("sha1")

    assert excinfo.value.exit_code == ExitCode.ALGORITHM
    assert "sha1" in str(excinfo.value)


def test_digest_sizes_match_hashlib() -> None:
    assert HashAlgorithm.SHA256.digest_size == 32
    assert HashAlgorithm.SHA384.digest_size == 48
    assert HashAlgorithm.SHA512.digest_size == 64
    for algorithm in HashAlgorithm:
        assert algorithm.new().digest_size == algorithm.digest_size


def test_ensure_available_accepts_builtin_algorithms() -> None:
    for algorithm in HashAlgorithm:
        ensure_available(algorithm)


def test_ensure_available_reports_missing_capability(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(hashlib, "algorithms_available", {"md5"})

    with pytest.raises(HashCapabilityError) as excinfo:
        ensure_available(HashAlgorithm.SHA384)

    assert excinfo.value.exit_code == ExitCode.ALGORITHM
