# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Closed set of digest algorithms accepted in SRI metadata."""

from __future__ import annotations

import hashlib
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from .errors import HashCapabilityError, UnknownAlgorithmError

if TYPE_CHECKING:
    from hashlib import _Hash


class HashAlgorithm(StrEnum):
    """Digest algorithms allowed in an ``integrity`` attribute."""

    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        """Return the raw digest length in bytes.

        Returns:
            int: 32, 48 or 64 depending on the algorithm.
        """

        return _DIGEST_SIZES[self]

    def new(self) -> _Hash:
        """Return a fresh ``hashlib`` object for the algorithm.

        Returns:
            _Hash: Hash object ready to receive data via ``update``.

        Raises:
            HashCapabilityError: If the interpreter cannot build the digest.
        """

        try:
            return hashlib.new(self.value)
        except ValueError as exc:
            raise HashCapabilityError(f"Hash algorithm '{self.value}' is unavailable: {exc}") from exc

    @classmethod
    def parse(cls, name: str | HashAlgorithm) -> HashAlgorithm:
        """Return the algorithm matching ``name`` (case-insensitive).

        Args:
            name: Algorithm name such as ``sha384`` or ``SHA-384``.

        Returns:
            HashAlgorithm: Matching enumeration member.

        Raises:
            UnknownAlgorithmError: If ``name`` is not an SRI algorithm.
        """

        if isinstance(name, HashAlgorithm):
            return name
        candidate = name.strip().lower().replace("-", "")
        try:
            return cls(candidate)
        except ValueError as exc:
            raise UnknownAlgorithmError(name) from exc


_DIGEST_SIZES: Final[dict[HashAlgorithm, int]] = {
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA384: 48,
    HashAlgorithm.SHA512: 64,
}


def ensure_available(algorithm: HashAlgorithm) -> None:
    """Fail fast when ``hashlib`` does not expose ``algorithm``.

    Args:
        algorithm: Algorithm selected for the run.

    Raises:
        HashCapabilityError: If the digest cannot be constructed.
    """

    if algorithm.value not in hashlib.algorithms_available:
        raise HashCapabilityError(f"Hash algorithm '{algorithm.value}' is not provided by this Python build")
    algorithm.new()


__all__ = ["HashAlgorithm", "ensure_available"]
