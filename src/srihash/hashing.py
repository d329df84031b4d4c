# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Digest computation and SRI formatting for individual files."""

from __future__ import annotations

import base64
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import BinaryIO

from .algorithms import HashAlgorithm
from .constants import READ_CHUNK_SIZE
from .errors import HashFailureError


class HashOutcome(StrEnum):
    """Result category for a single path."""

    OK = "ok"
    NOT_FOUND = "not-found"
    UNREADABLE = "unreadable"


@dataclass(frozen=True, slots=True)
class HashResult:
    """Outcome of hashing one path.

    Attributes:
        path: Path exactly as it was resolved.
        outcome: Category of the result.
        integrity: ``<algorithm>-<base64>`` value when ``outcome`` is ``OK``.
        reason: Short description of the failure otherwise.
    """

    path: str
    outcome: HashOutcome
    integrity: str | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the path was hashed successfully."""

        return self.outcome is HashOutcome.OK


def compute_digest(data: bytes, algorithm: HashAlgorithm) -> bytes:
    """Return the raw digest of ``data``."""

    hasher = algorithm.new()
    hasher.update(data)
    return _checked_digest(hasher.digest(), algorithm)


def format_integrity(digest: bytes, algorithm: HashAlgorithm) -> str:
    """Return the SRI metadata string for a raw ``digest``.

    Args:
        digest: Raw digest bytes.
        algorithm: Algorithm that produced ``digest``.

    Returns:
        str: ``<algorithm>-<base64>`` using standard, padded base64.
    """

    return f"{algorithm.value}-{base64.b64encode(digest).decode('ascii')}"


def integrity(data: bytes, algorithm: HashAlgorithm = HashAlgorithm.SHA384) -> str:
    """Return the SRI metadata string for in-memory ``data``."""

    return format_integrity(compute_digest(data, algorithm), algorithm)


def digest_stream(stream: BinaryIO, algorithm: HashAlgorithm) -> bytes:
    """Return the raw digest of everything readable from ``stream``.

    Args:
        stream: Binary stream read until exhaustion.
        algorithm: Algorithm applied to the bytes.

    Returns:
        bytes: Raw digest whose length matches ``algorithm.digest_size``.

    Raises:
        OSError: If reading from ``stream`` fails.
        HashFailureError: If the digest primitive misbehaves.
    """

    hasher = algorithm.new()
    for chunk in iter(lambda: stream.read(READ_CHUNK_SIZE), b""):
        try:
            hasher.update(chunk)
        except (TypeError, ValueError) as exc:
            raise HashFailureError(f"{algorithm.value} digest update failed: {exc}") from exc
    return _checked_digest(hasher.digest(), algorithm)


def hash_file(path: str, algorithm: HashAlgorithm) -> HashResult:
    """Hash the raw bytes stored at ``path``.

    Missing and unreadable paths are reported through the returned result so
    that callers can continue with the remaining files.

    Args:
        path: File path exactly as resolved.
        algorithm: Algorithm applied to the file contents.

    Returns:
        HashResult: Successful digest or a categorised failure.

    Raises:
        HashFailureError: If the digest primitive misbehaves.
        HashCapabilityError: If the digest cannot be constructed.
    """

    try:
        with Path(path).open("rb") as handle:
            digest = digest_stream(handle, algorithm)
    except FileNotFoundError:
        return HashResult(path=path, outcome=HashOutcome.NOT_FOUND, reason="does not exist")
    except OSError as exc:
        return HashResult(path=path, outcome=HashOutcome.UNREADABLE, reason=exc.strerror or str(exc))
    return HashResult(path=path, outcome=HashOutcome.OK, integrity=format_integrity(digest, algorithm))


def hash_paths(paths: Iterable[str], algorithm: HashAlgorithm) -> Iterator[HashResult]:
    """Yield one :class:`HashResult` per path, in order.

    Args:
        paths: Paths to hash sequentially.
        algorithm: Algorithm applied to every file.

    Yields:
        HashResult: Result for each path as soon as it is computed.
    """

    for path in paths:
        yield hash_file(path, algorithm)


def _checked_digest(digest: bytes, algorithm: HashAlgorithm) -> bytes:
    if len(digest) != algorithm.digest_size:
        raise HashFailureError(
            f"{algorithm.value} produced a {len(digest)}-byte digest; expected {algorithm.digest_size}",
        )
    return digest


__all__ = [
    "HashOutcome",
    "HashResult",
    "compute_digest",
    "digest_stream",
    "format_integrity",
    "hash_file",
    "hash_paths",
    "integrity",
]
