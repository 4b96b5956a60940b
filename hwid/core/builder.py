"""
MIT License

Fluent, single-use accumulator for assembling identifiers.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .identifier import Identifier, IdentifierType


class BuilderConsumedError(RuntimeError):
    """Raised when an :class:`IdentifierBuilder` is used after ``build()``."""


class IdentifierBuilder:
    """
    Collect a name and identifier types one call at a time.

    Every mutating call returns the builder so calls can be chained::

        IdentifierBuilder().name("HWID").add(cpu).add(ram).build()
    """

    def __init__(self) -> None:
        self._name: Optional[str] = None
        self._types: List[IdentifierType] = []
        self._consumed = False

    @classmethod
    def new(cls) -> "IdentifierBuilder":
        return cls()

    def _check_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError("IdentifierBuilder already built; create a new builder")

    def name(self, value: str) -> "IdentifierBuilder":
        self._check_open()
        self._name = value
        return self

    def add(self, identifier_type: IdentifierType) -> "IdentifierBuilder":
        self._check_open()
        self._types.append(identifier_type)
        return self

    def extend(self, identifier_types: Iterable[IdentifierType]) -> "IdentifierBuilder":
        self._check_open()
        for identifier_type in identifier_types:
            self.add(identifier_type)
        return self

    def build(self) -> Identifier:
        self._check_open()
        self._consumed = True
        return Identifier(name=self._name, types=tuple(self._types))


__all__ = ["BuilderConsumedError", "IdentifierBuilder"]
