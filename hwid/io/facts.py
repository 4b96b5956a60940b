"""
MIT License

Facts-table adapter: build identifiers from ``type``/``key``/``value`` tables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from ..core.identifier import DataPair, Identifier, IdentifierType
from ..util.logging import get_logger

LOGGER = get_logger(__name__)

FACT_COLUMNS = ["type", "key", "value"]


def identifier_from_frame(df: pd.DataFrame, name: Optional[str] = None) -> Identifier:
    """
    Group fact rows into an :class:`Identifier`.

    Types appear in order of their first row; pairs keep row order within
    each type. Missing cells become empty strings.
    """
    missing = [col for col in FACT_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Facts table missing columns: {', '.join(missing)}")

    grouped: Dict[str, List[DataPair]] = {}
    facts = df[FACT_COLUMNS].astype(object).fillna("")
    for type_name, key, value in facts.itertuples(index=False, name=None):
        grouped.setdefault(str(type_name), []).append(DataPair(str(key), str(value)))

    types = [IdentifierType(type_name, pairs) for type_name, pairs in grouped.items()]
    return Identifier(name=name, types=types)


def read_facts(path: str | Path, name: Optional[str] = None, sep: str = "\t") -> Identifier:
    facts_path = Path(path)
    if not facts_path.exists():
        raise FileNotFoundError(f"Facts table not found: {path}")
    df = pd.read_csv(facts_path, sep=sep, dtype=str, keep_default_na=False)
    identifier = identifier_from_frame(df, name=name)
    LOGGER.info("Loaded %s facts across %s types from %s", len(df), len(identifier.types), facts_path)
    return identifier


def facts_frame(identifier: Identifier) -> pd.DataFrame:
    """Flatten an identifier into one row per pair, in serialization order."""
    rows = [
        {"type": item.name, "key": pair.key, "value": pair.value}
        for item in identifier.types
        for pair in item.data
    ]
    return pd.DataFrame(rows, columns=FACT_COLUMNS)


__all__ = ["FACT_COLUMNS", "facts_frame", "identifier_from_frame", "read_facts"]
