from decimal import Decimal

import pytest

from confslice.errors import DataConversionError
from confslice.model import (
    Array,
    Configuration,
    Data,
    DataKind,
    Entity,
    Key,
    KeyKind,
    List,
    Pairs,
    Value,
)


def test_default_data_is_empty_none() -> None:
    data = Data()
    assert data.kind == DataKind.NONE
    assert data.text == ""
    assert data.value is None


def test_data_with_kind_and_set() -> None:
    data = Data.with_kind(DataKind.INTEGER)
    assert data.kind == DataKind.INTEGER
    assert data.text == ""

    data.set("12", DataKind.INTEGER)
    assert data.value == 12


@pytest.mark.parametrize(
    ("text", "kind", "expected"),
    [
        ("12", DataKind.INTEGER, 12),
        ("-7", DataKind.INTEGER, -7),
        ("2.5", DataKind.DOUBLE, 2.5),
        ('"hi there"', DataKind.STRING, "hi there"),
    ],
)
def test_data_value_uses_natural_type(text: str, kind: DataKind, expected: object) -> None:
    assert Data(text, kind).value == expected


def test_string_conversion_strips_quotes_but_keeps_escapes() -> None:
    data = Data('"a\\"b"', DataKind.STRING)
    assert data.as_type(str) == 'a\\"b'
    assert Data("12", DataKind.INTEGER).as_type(str) == "12"


def test_decimal_conversion_keeps_typed_digits() -> None:
    assert Data("3.140", DataKind.DOUBLE).as_type(Decimal) == Decimal("3.140")
    assert str(Data("3.140", DataKind.DOUBLE).as_type(Decimal)) == "3.140"
    assert Data("123456789012345678901234567890.5", DataKind.DOUBLE).as_type(Decimal) == Decimal(
        "123456789012345678901234567890.5"
    )
    assert Data("42", DataKind.INTEGER).as_type(Decimal) == Decimal(42)


def test_decimal_conversion_keeps_long_integers_exact() -> None:
    text = "1234567890123456789012345678901"
    data = Data(text, DataKind.INTEGER)

    assert data.as_type(Decimal) == Decimal(text)
    assert str(data.as_type(Decimal)) == text
    assert str(Data("-" + text, DataKind.INTEGER).as_type(Decimal)) == "-" + text


def test_double_to_int_truncates_toward_zero() -> None:
    assert Data("3.99", DataKind.DOUBLE).as_type(int) == 3
    assert Data("-3.99", DataKind.DOUBLE).as_type(int) == -3


@pytest.mark.parametrize(
    ("data", "target"),
    [
        (Data('"abc"', DataKind.STRING), int),
        (Data('"abc"', DataKind.STRING), float),
        (Data('"abc"', DataKind.STRING), Decimal),
        (Data(), int),
    ],
)
def test_failed_conversion_raises(data: Data, target: type) -> None:
    with pytest.raises(DataConversionError) as excinfo:
        data.as_type(target)

    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.diagnostic.code == "DATA_CONVERSION_FAILED"


def test_unsupported_conversion_target() -> None:
    with pytest.raises(TypeError):
        Data("1", DataKind.INTEGER).as_type(bytes)  # type: ignore[type-var]


def test_key_kinds_and_ids() -> None:
    keys = [Value("v"), Array("a"), List("l"), Pairs("p")]
    assert [key.kind for key in keys] == [KeyKind.VALUE, KeyKind.ARRAY, KeyKind.LIST, KeyKind.PAIRS]

    value = keys[0]
    value.set_id("renamed")
    assert value.id == "renamed"


def test_value_get_and_set() -> None:
    value = Value("v")
    assert value.get().kind == DataKind.NONE
    value.set(Data("1", DataKind.INTEGER))
    assert value.get().text == "1"


def test_array_is_sparse() -> None:
    arr = Array("a")
    arr[5] = Data("x", DataKind.STRING)

    assert len(arr) == 1
    assert 5 in arr
    assert 0 not in arr
    assert arr.get(0) is None
    assert len(arr) == 1


def test_array_subscript_read_creates_empty_entry() -> None:
    arr = Array("a")
    data = arr[3]

    assert data.kind == DataKind.NONE
    assert 3 in arr
    assert arr.indices() == [3]
    assert arr[3] is data


def test_array_rejects_negative_index() -> None:
    arr = Array("a")
    with pytest.raises(IndexError):
        arr[-1] = Data()
    with pytest.raises(IndexError):
        arr[-1]


def test_list_drains_in_insertion_order() -> None:
    klist = List("l")
    for text in ("1", "2", "3"):
        klist.insert_data(Data(text, DataKind.INTEGER))
    klist.insert_list(List("l"))

    assert [klist.drain_next_data().text for _ in range(3)] == ["1", "2", "3"]
    assert klist.drain_next_data() is None
    assert klist.size_of_data() == 0
    assert klist.drain_next_list() is not None
    assert klist.drain_next_list() is None
    assert klist.size_of_lists() == 0


def test_list_clear() -> None:
    klist = List("l")
    klist.insert_data(Data("1", DataKind.INTEGER))
    klist.insert_list(List("l"))

    klist.clear_data()
    assert klist.size_of_data() == 0
    assert klist.size_of_lists() == 1
    klist.clear_lists()
    assert klist.size_of_lists() == 0


def test_list_copy_is_deep() -> None:
    inner = List("l")
    inner.insert_data(Data("2", DataKind.INTEGER))
    outer = List("l")
    outer.insert_data(Data("1", DataKind.INTEGER))
    outer.insert_list(inner)

    clone = outer.copy()
    outer.drain_next_data()
    inner.drain_next_data()

    assert clone.id == "l"
    assert clone.size_of_data() == 1
    cloned_inner = clone.drain_next_list()
    assert cloned_inner is not None
    assert cloned_inner is not inner
    assert cloned_inner.drain_next_data().text == "2"


def test_list_insert_list_takes_the_given_object() -> None:
    sub = List("l")
    klist = List("l")
    klist.insert_list(sub)
    assert klist.drain_next_list() is sub


def test_pairs_keep_duplicates_in_order() -> None:
    pairs = Pairs("p")
    pairs.insert("a", Data("1", DataKind.INTEGER))
    pairs.insert("a", Data("2", DataKind.INTEGER))

    assert len(pairs) == 2
    first = pairs.drain_next()
    assert first is not None
    assert first[0] == "a"
    assert first[1].text == "1"
    pairs.clear()
    assert pairs.size() == 0
    assert pairs.drain_next() is None


@pytest.mark.parametrize("scope_type", [Configuration, Entity])
def test_scope_rejects_duplicate_ids(scope_type: type[Configuration] | type[Entity]) -> None:
    scope = scope_type()
    first = Value("a", Data("1", DataKind.INTEGER))

    assert scope.add_key(first) is True
    assert scope.add_key(Value("a", Data("2", DataKind.INTEGER))) is False
    assert scope.add_key(Array("b")) is True
    assert scope.add_entity(Entity("a")) is True
    assert scope.add_entity(Entity("a")) is False

    assert scope.size_of_keys() == 2
    assert scope.size_of_entities() == 1
    assert scope.find_key("a") is first


def test_find_is_non_destructive() -> None:
    config = Configuration()
    config.add_key(Value("a"))
    config.add_entity(Entity("e"))

    assert config.find_key("a") is not None
    assert config.find_key("a") is not None
    assert config.find_key("missing") is None
    assert config.find_entity("e") is not None
    assert config.find_entity("missing") is None
    assert config.size_of_keys() == 1
    assert config.size_of_entities() == 1


def test_scope_drain_is_one_shot() -> None:
    entity = Entity("e")
    for key_id in ("x", "y", "z"):
        entity.add_key(Value(key_id))
    entity.add_entity(Entity("child"))

    assert [entity.drain_next_key().id for _ in range(3)] == ["x", "y", "z"]
    assert entity.drain_next_key() is None
    assert entity.size_of_keys() == 0
    assert entity.drain_next_entity().id == "child"
    assert entity.drain_next_entity() is None


def test_scope_clear() -> None:
    config = Configuration()
    config.add_key(Value("a"))
    config.add_entity(Entity("e"))

    config.clear_keys()
    assert config.size_of_keys() == 0
    assert config.size_of_entities() == 1
    config.clear_entities()
    assert config.size_of_entities() == 0
    assert config.key_ids() == []


def test_entity_set_id() -> None:
    entity = Entity()
    assert entity.id == ""
    entity.set_id("named")
    assert entity.id == "named"


def test_key_base_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Key("x")  # type: ignore[abstract]
    assert Value("v").kind == KeyKind.VALUE
