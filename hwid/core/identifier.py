"""
MIT License

Identifier data model and its canonical text serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..util.hashing import Hasher, stable_hash
from ..util.logging import get_logger
from ..util.text import enclose

LOGGER = get_logger(__name__)

CPU = "CPU"
RAM = "RAM"
DISK = "DISK"
GPU = "GPU"
MOTHERBOARD = "MOTHERBOARD"
BIOS = "BIOS"
NETWORK = "NETWORK"
OS = "OS"

KNOWN_TYPES: Tuple[str, ...] = (CPU, RAM, DISK, GPU, MOTHERBOARD, BIOS, NETWORK, OS)


@dataclass(frozen=True)
class DataPair:
    key: str
    value: str

    def serialize(self) -> str:
        return f"{self.key}={self.value}"


@dataclass(frozen=True)
class IdentifierType:
    """A named category (``CPU``, ``RAM``, ...) holding ordered key/value pairs."""

    name: str
    data: Tuple[DataPair, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))

    def serialize(self) -> str:
        return enclose(self.name, (pair.serialize() for pair in self.data), "(", ")")


@dataclass(frozen=True)
class Identifier:
    """
    Optional name plus an ordered sequence of :class:`IdentifierType`.

    The serialized form is ``NAME[TYPE(key=value, ...), ...]``. Order of types
    and pairs is kept exactly as given. Reserved characters inside names, keys
    or values are emitted verbatim, so such text cannot be parsed back.
    """

    name: Optional[str] = None
    types: Tuple[IdentifierType, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))

    def serialize(self) -> str:
        return enclose(self.name or "", (item.serialize() for item in self.types), "[", "]")

    def render(self, apply_hash: bool = False, hasher: Hasher | None = None) -> str:
        """
        Produce the canonical text, or its digest when ``apply_hash`` is set.

        Parameters
        ----------
        apply_hash:
            Return only the hex digest of the canonical text instead of the text.
        hasher:
            Digest function to use; defaults to SHA3-512.
        """
        text = self.serialize()
        LOGGER.debug("Rendered identifier with %d types (%d chars)", len(self.types), len(text))
        if not apply_hash:
            return text
        return stable_hash(text, hasher)

    def __str__(self) -> str:
        return self.serialize()


__all__ = [
    "BIOS",
    "CPU",
    "DISK",
    "GPU",
    "KNOWN_TYPES",
    "MOTHERBOARD",
    "NETWORK",
    "OS",
    "RAM",
    "DataPair",
    "Identifier",
    "IdentifierType",
]
