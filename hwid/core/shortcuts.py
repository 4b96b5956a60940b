"""
MIT License

Terse constructors for data pairs and identifier types.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Tuple, Union

from .identifier import DataPair, IdentifierType

PairLike = Union[DataPair, Tuple[str, str]]


def data_pair(key: str, value: str) -> DataPair:
    return DataPair(key, value)


def _as_pair(item: PairLike) -> DataPair:
    if isinstance(item, DataPair):
        return item
    key, value = item
    return DataPair(key, value)


def pairs_from(items: Union[Mapping[str, str], Iterable[PairLike]]) -> Tuple[DataPair, ...]:
    """Build ordered pairs from a mapping (iteration order) or an iterable of pairs."""
    if isinstance(items, Mapping):
        return tuple(DataPair(key, value) for key, value in items.items())
    return tuple(_as_pair(item) for item in items)


def identifier_type(name: str, *pairs: PairLike) -> IdentifierType:
    """
    Build an :class:`IdentifierType` from positional pairs.

    ``identifier_type(CPU, ("Vendor", "Intel"), data_pair("Model", "Xeon"))``
    """
    return IdentifierType(name, pairs_from(pairs))


__all__ = ["PairLike", "data_pair", "identifier_type", "pairs_from"]
