import pytest

from irsfire.constants import RECORD_LENGTH
from irsfire.spec import (
    A_RECORD_LAYOUT,
    B_RECORD_LAYOUT,
    C_RECORD_LAYOUT,
    F_RECORD_LAYOUT,
    K_RECORD_LAYOUT,
    T_RECORD_LAYOUT,
    FieldProperty,
    FieldType,
    SpecField,
    SpecRecord,
    to_specifications,
)

ALL_LAYOUTS = [
    T_RECORD_LAYOUT,
    A_RECORD_LAYOUT,
    B_RECORD_LAYOUT,
    C_RECORD_LAYOUT,
    K_RECORD_LAYOUT,
    F_RECORD_LAYOUT,
]


def test_to_specifications_orders_by_start():
    layout = {
        "Second": SpecField(5, 2, FieldType.NUMERIC, FieldProperty.REQUIRED),
        "First": SpecField(0, 5, FieldType.ALPHANUMERIC, FieldProperty.APPLICABLE),
    }
    records = to_specifications(layout)
    assert [record.name for record in records] == ["First", "Second"]
    assert records[0] == SpecRecord(0, "First", layout["First"])


def test_to_specifications_ties_break_by_name():
    field = SpecField(3, 1, FieldType.ALPHANUMERIC, FieldProperty.NULLABLE)
    records = to_specifications({"Zeta": field, "Alpha": field, "Mid": field})
    assert [record.name for record in records] == ["Alpha", "Mid", "Zeta"]


def test_to_specifications_empty():
    assert to_specifications({}) == []


@pytest.mark.parametrize("layout", ALL_LAYOUTS)
def test_layouts_cover_whole_record_without_gaps(layout):
    records = to_specifications(layout)
    position = 0
    for record in records:
        assert record.key == position, record.name
        position = record.field.end
    assert position == RECORD_LENGTH


@pytest.mark.parametrize("layout", ALL_LAYOUTS)
def test_keys_match_field_starts(layout):
    for record in to_specifications(layout):
        assert record.key == record.field.start
        assert layout[record.name] is record.field


def test_transmitter_tin_field():
    assert T_RECORD_LAYOUT["TIN"] == SpecField(6, 9, FieldType.NUMERIC, FieldProperty.REQUIRED)


def test_payee_reserved_is_expandable_extension_block():
    last = to_specifications(B_RECORD_LAYOUT)[-1]
    assert last.name == "Reserved"
    assert last.key == 543
    assert last.field.length == 207
    assert last.field.required is FieldProperty.EXPANDABLE


def test_payment_amounts_and_control_totals_positions():
    payee = {record.name: record.key for record in to_specifications(B_RECORD_LAYOUT)}
    end_payer = {record.name: record.key for record in to_specifications(C_RECORD_LAYOUT)}
    states = {record.name: record.key for record in to_specifications(K_RECORD_LAYOUT)}
    assert payee["PaymentAmount1"] == 54
    assert payee["PaymentAmountJ"] == 258
    assert end_payer["ControlTotal1"] == 15
    assert end_payer["ControlTotalJ"] == 321
    assert states["ControlTotalJ"] == end_payer["ControlTotalJ"]


def test_field_slice_extracts_value():
    line = "T2019" + " " * (RECORD_LENGTH - 5)
    values = {record.name: line[record.field.slice] for record in to_specifications(T_RECORD_LAYOUT)}
    assert values["RecordType"] == "T"
    assert values["PaymentYear"] == "2019"


def test_field_property_values():
    assert FieldProperty.REQUIRED.value == "Y"
    assert FieldProperty("A") is FieldProperty.APPLICABLE
    assert FieldProperty("") is FieldProperty.NULLABLE


def test_field_types_are_distinct_bits():
    values = [member.value for member in FieldType]
    assert len(set(values)) == len(values)
    for value in values:
        assert value & (value - 1) == 0
        assert FieldType(value).value == value


def test_layouts_are_read_only():
    with pytest.raises(TypeError):
        T_RECORD_LAYOUT["New"] = SpecField(0, 1, FieldType.ALPHANUMERIC, FieldProperty.NULLABLE)


def test_spec_field_is_frozen():
    field = SpecField(0, 1, FieldType.ALPHANUMERIC, FieldProperty.REQUIRED)
    with pytest.raises(AttributeError):
        field.start = 3
    assert field.start == 0