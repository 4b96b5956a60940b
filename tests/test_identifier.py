"""Serialization and hashing behaviour of the identifier data model."""

from __future__ import annotations

import pytest

from hwid.core.identifier import CPU, KNOWN_TYPES, RAM, DataPair, Identifier, IdentifierType

HWID_SHA3_512 = (
    "92187e765ecc39a93e9f46fa0a951d52822f8c1691cedd004db1a0e1b86a82aa"
    "5a1cd916f6766c8f798787b00eaedc4ada62e1043d1649abbe02161c42a59cfa"
)
NAME_SHA3_512 = (
    "e49dc6621f68ebd6e9cf46441f36222bc8325727f278edf20fb990da70fa90db"
    "9a5ee8d5acec458703b49701682ff1e2de2483a0e7dba87f1fc14a7a1c20fb7e"
)


def _cpu() -> IdentifierType:
    return IdentifierType(CPU, [DataPair("Vendor", "Intel"), DataPair("Model", "Xeon E5-2670")])


def test_data_pair_exposes_fields_and_serializes() -> None:
    pair = DataPair("key", "value")

    assert pair.key == "key"
    assert pair.value == "value"
    assert pair.serialize() == "key=value"


def test_identifier_type_keeps_pairs_in_order() -> None:
    pairs = [DataPair("b", "2"), DataPair("a", "1"), DataPair("b", "2")]
    item = IdentifierType("X", pairs)

    assert item.data == tuple(pairs)
    assert item.serialize() == "X(b=2, a=1, b=2)"


def test_identifier_type_without_pairs() -> None:
    assert IdentifierType("CPU").serialize() == "CPU()"
    assert IdentifierType("CPU", []).serialize() == "CPU()"


@pytest.mark.parametrize(
    "identifier, expected",
    [
        (Identifier(), "[]"),
        (Identifier(None, []), "[]"),
        (Identifier("HWID"), "HWID[]"),
        (Identifier("HWID", [IdentifierType("CPU")]), "HWID[CPU()]"),
        (Identifier(None, [IdentifierType("A"), IdentifierType("B", [DataPair("k", "v")])]), "[A(), B(k=v)]"),
        (Identifier("name", [IdentifierType("name", [DataPair("key", "value")])]), "name[name(key=value)]"),
    ],
)
def test_render_without_hash(identifier: Identifier, expected: str) -> None:
    assert identifier.render(False) == expected
    assert identifier.render() == expected
    assert str(identifier) == expected


def test_full_example_text_and_digest() -> None:
    identifier = Identifier("HWID", [_cpu()])

    assert identifier.render(False) == "HWID[CPU(Vendor=Intel, Model=Xeon E5-2670)]"
    assert identifier.render(True) == HWID_SHA3_512


def test_named_single_pair_digest() -> None:
    identifier = Identifier("name", [IdentifierType("name", [DataPair("key", "value")])])

    assert identifier.render(True) == NAME_SHA3_512


def test_hashing_is_idempotent_and_fixed_width() -> None:
    identifier = Identifier("HWID", [_cpu()])

    first = identifier.render(True)
    second = identifier.render(True)

    assert first == second
    assert len(first) == 128
    assert Identifier().render(True) != Identifier("HWID").render(True)
    assert len(Identifier().render(True)) == 128


def test_structurally_equal_values_render_identically() -> None:
    left = Identifier("HWID", [_cpu(), IdentifierType(RAM, [DataPair("Size", "16GB")])])
    right = Identifier("HWID", (_cpu(), IdentifierType(RAM, (DataPair("Size", "16GB"),))))

    assert left == right
    assert hash(left) == hash(right)
    assert left.render(False) == right.render(False)
    assert left.render(True) == right.render(True)


BASELINE = Identifier("HWID", [_cpu(), IdentifierType(RAM)])


@pytest.mark.parametrize(
    "variant",
    [
        Identifier("HWID2", [_cpu(), IdentifierType(RAM)]),
        Identifier(None, [_cpu(), IdentifierType(RAM)]),
        Identifier("HWID", [IdentifierType("GPU", _cpu().data), IdentifierType(RAM)]),
        Identifier("HWID", [IdentifierType(CPU, [DataPair("Vendor", "AMD"), DataPair("Model", "Xeon E5-2670")]), IdentifierType(RAM)]),
        Identifier("HWID", [IdentifierType(CPU, [DataPair("Brand", "Intel"), DataPair("Model", "Xeon E5-2670")]), IdentifierType(RAM)]),
        Identifier("HWID", [IdentifierType(CPU, tuple(reversed(_cpu().data))), IdentifierType(RAM)]),
        Identifier("HWID", [IdentifierType(RAM), _cpu()]),
    ],
)
def test_any_change_alters_text_and_digest(variant: Identifier) -> None:
    assert variant.render(False) != BASELINE.render(False)
    assert variant.render(True) != BASELINE.render(True)


def test_reserved_characters_are_emitted_verbatim() -> None:
    identifier = Identifier("a[b", [IdentifierType("T(", [DataPair("k=", "v,w")])])

    assert identifier.render(False) == "a[b[T((k==v,w)]"


def test_entities_are_immutable() -> None:
    identifier = Identifier("HWID", [_cpu()])

    with pytest.raises(AttributeError):
        identifier.name = "other"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        identifier.types[0].data[0].key = "other"  # type: ignore[misc]


def test_known_type_names_are_plain_strings() -> None:
    assert KNOWN_TYPES == ("CPU", "RAM", "DISK", "GPU", "MOTHERBOARD", "BIOS", "NETWORK", "OS")
    assert len(set(KNOWN_TYPES)) == len(KNOWN_TYPES)
    for type_name in KNOWN_TYPES:
        assert IdentifierType(type_name).serialize() == f"{type_name}()"


def test_free_form_type_names_are_accepted() -> None:
    assert IdentifierType("Custom Sensor", [DataPair("k", "v")]).serialize() == "Custom Sensor(k=v)"
