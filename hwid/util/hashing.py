"""
MIT License

Deterministic digest functions used to reduce identifier text to a fixed-size hash.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import List, Optional, Protocol, Union, runtime_checkable

from .logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_ALGORITHM = "sha3_512"
DEFAULT_SHAKE_LENGTH = 64


class HashError(RuntimeError):
    """Raised when the digest function fails on an identifier payload."""


@runtime_checkable
class Hasher(Protocol):
    """One-way function from bytes to a fixed-width hex digest."""

    name: str
    digest_size: int

    def hexdigest(self, payload: bytes) -> str:
        ...


@dataclass(frozen=True)
class HashConfig:
    algorithm: str = DEFAULT_ALGORITHM
    length: Optional[int] = None


def _normalize_algorithm(algorithm: str) -> str:
    return algorithm.strip().lower().replace("-", "_")


_HASHLIB_NAMES = {_normalize_algorithm(name): name for name in hashlib.algorithms_available}


def available_algorithms() -> List[str]:
    """Return the hashlib algorithm names usable by :class:`HashlibHasher`."""
    return sorted(_HASHLIB_NAMES)


def make_hash_config(algorithm: str | None = None, length: int | None = None) -> HashConfig:
    name = _normalize_algorithm(algorithm) if algorithm else DEFAULT_ALGORITHM
    if name not in _HASHLIB_NAMES:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")
    if length is not None and length <= 0:
        raise ValueError(f"Invalid digest length: {length}")
    return HashConfig(algorithm=name, length=length)


class HashlibHasher:
    """
    :class:`Hasher` backed by :func:`hashlib.new`.

    Variable-length ``shake_*`` algorithms emit ``length`` bytes
    (``DEFAULT_SHAKE_LENGTH`` when unset); fixed-length algorithms ignore it.
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM, length: int | None = None) -> None:
        config = make_hash_config(algorithm, length)
        self.name = config.algorithm
        self._variable = self.name.startswith("shake_")
        if self._variable:
            self.digest_size = config.length or DEFAULT_SHAKE_LENGTH
        else:
            self.digest_size = hashlib.new(_HASHLIB_NAMES[self.name]).digest_size

    def hexdigest(self, payload: bytes) -> str:
        try:
            digest = hashlib.new(_HASHLIB_NAMES[self.name], payload)
            if self._variable:
                return digest.hexdigest(self.digest_size)
            return digest.hexdigest()
        except (ValueError, TypeError, MemoryError) as exc:
            LOGGER.error("%s digest failed on %d-byte payload", self.name, len(payload))
            raise HashError(f"{self.name} digest failed") from exc

    def __repr__(self) -> str:
        return f"HashlibHasher({self.name!r}, digest_size={self.digest_size})"


def make_hasher(config: Union[HashConfig, str, None] = None) -> HashlibHasher:
    """Build a hasher from a :class:`HashConfig`, an algorithm name, or the default."""
    if isinstance(config, HashConfig):
        return HashlibHasher(config.algorithm, config.length)
    return HashlibHasher(config or DEFAULT_ALGORITHM)


def stable_hash(text: str, hasher: Hasher | None = None) -> str:
    """
    Return the hex digest of ``text`` encoded as UTF-8.

    Any failure raised by a third-party ``hasher`` is re-raised as
    :class:`HashError` so callers see a single failure type.
    """
    active = hasher if hasher is not None else make_hasher()
    try:
        return active.hexdigest(text.encode("utf-8"))
    except HashError:
        raise
    except Exception as exc:
        LOGGER.error("Hasher %s failed: %s", getattr(active, "name", active), exc)
        raise HashError(f"{getattr(active, 'name', 'hasher')} digest failed") from exc


__all__ = [
    "DEFAULT_ALGORITHM",
    "HashConfig",
    "HashError",
    "Hasher",
    "HashlibHasher",
    "available_algorithms",
    "make_hash_config",
    "make_hasher",
    "stable_hash",
]
