"""Field specifications and fixed-width layouts of the main FIRE records."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType


class FieldProperty(str, enum.Enum):
    """How a field must be filled."""

    NULLABLE = ""
    REQUIRED = "Y"
    APPLICABLE = "A"
    EXPANDABLE = "E"
    OMITTED = "O"


class FieldType(enum.IntEnum):
    """Kind of value a field holds, which fixes how it is padded and checked."""

    ALPHANUMERIC = 1 << 0
    ALPHANUMERIC_RIGHT_ALIGN = 1 << 1
    NUMERIC = 1 << 2
    ZERO_NUMERIC = 1 << 3
    TELEPHONE_NUMBER = 1 << 4
    PERCENT = 1 << 5
    EMAIL = 1 << 6
    DATE_YEAR = 1 << 7
    DATE = 1 << 8


@dataclass(frozen=True)
class SpecField:
    """Position, width, kind and fill rule of one field in a record."""

    start: int
    length: int
    type: FieldType
    required: FieldProperty

    @property
    def end(self) -> int:
        """Offset just past the last character of the field."""
        return self.start + self.length

    @property
    def slice(self) -> slice:
        """Slice that cuts the field out of a record line."""
        return slice(self.start, self.end)


@dataclass(frozen=True)
class SpecRecord:
    """A named field of a layout, keyed by its starting offset."""

    key: int
    name: str
    field: SpecField


def to_specifications(fields_format: Mapping[str, SpecField]) -> list[SpecRecord]:
    """Return the fields of a layout ordered by start offset, then by name."""
    records: Iterable[SpecRecord] = (
        SpecRecord(field.start, name, field) for name, field in fields_format.items()
    )
    return sorted(records, key=lambda record: (record.key, record.name))


_A = FieldType.ALPHANUMERIC
_N = FieldType.NUMERIC
_Z = FieldType.ZERO_NUMERIC
_TEL = FieldType.TELEPHONE_NUMBER
_EMAIL = FieldType.EMAIL
_YEAR = FieldType.DATE_YEAR

_NUL = FieldProperty.NULLABLE
_REQ = FieldProperty.REQUIRED
_APP = FieldProperty.APPLICABLE
_EXP = FieldProperty.EXPANDABLE

_AMOUNT_SUFFIXES = "123456789ABCDEFGHJ"


def _layout(fields: dict[str, tuple[int, int, FieldType, FieldProperty]]) -> Mapping[str, SpecField]:
    return MappingProxyType({name: SpecField(*spec) for name, spec in fields.items()})


def _control_totals() -> dict[str, tuple[int, int, FieldType, FieldProperty]]:
    return {
        f"ControlTotal{suffix}": (15 + 18 * index, 18, _Z, _APP)
        for index, suffix in enumerate(_AMOUNT_SUFFIXES)
    }


# Transmitter "T" record
T_RECORD_LAYOUT = _layout({
    "RecordType": (0, 1, _A, _REQ),
    "PaymentYear": (1, 4, _YEAR, _REQ),
    "PriorYearDataIndicator": (5, 1, _A, _APP),
    "TIN": (6, 9, _N, _REQ),
    "TCC": (15, 5, _A, _REQ),
    "Blank1": (20, 7, _A, _NUL),
    "TestFileIndicator": (27, 1, _A, _APP),
    "ForeignEntityIndicator": (28, 1, _A, _APP),
    "TransmitterName": (29, 40, _A, _REQ),
    "TransmitterNameContinuation": (69, 40, _A, _APP),
    "CompanyName": (109, 40, _A, _REQ),
    "CompanyNameContinuation": (149, 40, _A, _APP),
    "CompanyMailingAddress": (189, 40, _A, _REQ),
    "CompanyCity": (229, 40, _A, _REQ),
    "CompanyState": (269, 2, _A, _REQ),
    "CompanyZipCode": (271, 9, _N, _REQ),
    "Blank2": (280, 15, _A, _NUL),
    "TotalNumberPayees": (295, 8, _Z, _APP),
    "ContactName": (303, 40, _A, _REQ),
    "ContactTelephoneNumber": (343, 15, _TEL, _REQ),
    "ContactEmailAddress": (358, 50, _EMAIL, _APP),
    "Blank3": (408, 91, _A, _NUL),
    "RecordSequenceNumber": (499, 8, _Z, _REQ),
    "Blank4": (507, 10, _A, _NUL),
    "VendorIndicator": (517, 1, _A, _REQ),
    "VendorName": (518, 40, _A, _APP),
    "VendorMailingAddress": (558, 40, _A, _APP),
    "VendorCity": (598, 40, _A, _APP),
    "VendorState": (638, 2, _A, _APP),
    "VendorZipCode": (640, 9, _N, _APP),
    "VendorContactName": (649, 40, _A, _APP),
    "VendorContactTelephoneNumber": (689, 15, _TEL, _APP),
    "Blank5": (704, 35, _A, _NUL),
    "VendorForeignEntityIndicator": (739, 1, _A, _APP),
    "Blank6": (740, 8, _A, _NUL),
    "Blank7": (748, 2, _A, _NUL),
})

# Payer "A" record
A_RECORD_LAYOUT = _layout({
    "RecordType": (0, 1, _A, _REQ),
    "PaymentYear": (1, 4, _YEAR, _REQ),
    "CombinedFSFilingProgram": (5, 1, _A, _APP),
    "Blank1": (6, 5, _A, _NUL),
    "TIN": (11, 9, _N, _REQ),
    "PayerNameControl": (20, 4, _A, _APP),
    "LastFilingIndicator": (24, 1, _A, _APP),
    "TypeOfReturn": (25, 2, _A, _REQ),
    "AmountCodes": (27, 16, _A, _REQ),
    "Blank2": (43, 8, _A, _NUL),
    "ForeignEntityIndicator": (51, 1, _A, _APP),
    "FirstPayerNameLine": (52, 40, _A, _REQ),
    "SecondPayerNameLine": (92, 40, _A, _APP),
    "TransferAgentIndicator": (132, 1, _A, _REQ),
    "PayerShippingAddress": (133, 40, _A, _REQ),
    "PayerCity": (173, 40, _A, _REQ),
    "PayerState": (213, 2, _A, _REQ),
    "PayerZipCode": (215, 9, _N, _APP),
    "PayerTelephoneNumber": (224, 15, _TEL, _REQ),
    "Blank3": (239, 260, _A, _NUL),
    "RecordSequenceNumber": (499, 8, _Z, _REQ),
    "Blank4": (507, 241, _A, _NUL),
    "Blank5": (748, 2, _A, _NUL),
})

# Payee "B" record
B_RECORD_LAYOUT = _layout({
    "RecordType": (0, 1, _A, _REQ),
    "PaymentYear": (1, 4, _YEAR, _REQ),
    "CorrectedReturnIndicator": (5, 1, _A, _APP),
    "NameControl": (6, 4, _A, _APP),
    "TypeOfTIN": (10, 1, _N, _APP),
    "TIN": (11, 9, _N, _REQ),
    "PayerAccountNumber": (20, 20, _A, _APP),
    "PayerOfficeCode": (40, 4, _A, _APP),
    "Blank1": (44, 10, _A, _NUL),
    **{
        f"PaymentAmount{suffix}": (54 + 12 * index, 12, _Z, _APP)
        for index, suffix in enumerate(_AMOUNT_SUFFIXES)
    },
    "Blank2": (270, 16, _A, _NUL),
    "ForeignCountryIndicator": (286, 1, _A, _APP),
    "FirstPayeeNameLine": (287, 40, _A, _REQ),
    "SecondPayeeNameLine": (327, 40, _A, _APP),
    "PayeeMailingAddress": (367, 40, _A, _REQ),
    "Blank3": (407, 40, _A, _NUL),
    "PayeeCity": (447, 40, _A, _REQ),
    "PayeeState": (487, 2, _A, _REQ),
    "PayeeZipCode": (489, 9, _N, _APP),
    "Blank4": (498, 1, _A, _NUL),
    "RecordSequenceNumber": (499, 8, _Z, _REQ),
    "Blank5": (507, 36, _A, _NUL),
    "Reserved": (543, 207, _A, _EXP),
})

# End of payer "C" record
C_RECORD_LAYOUT = _layout({
    "RecordType": (0, 1, _A, _REQ),
    "NumberPayees": (1, 8, _Z, _REQ),
    "Blank1": (9, 6, _A, _NUL),
    **_control_totals(),
    "Blank2": (339, 160, _A, _NUL),
    "RecordSequenceNumber": (499, 8, _Z, _REQ),
    "Blank3": (507, 241, _A, _NUL),
    "Blank4": (748, 2, _A, _NUL),
})

# State totals "K" record
K_RECORD_LAYOUT = _layout({
    "RecordType": (0, 1, _A, _REQ),
    "NumberPayees": (1, 8, _Z, _REQ),
    "Blank1": (9, 6, _A, _NUL),
    **_control_totals(),
    "Blank2": (339, 160, _A, _NUL),
    "RecordSequenceNumber": (499, 8, _Z, _REQ),
    "Blank3": (507, 199, _A, _NUL),
    "StateIncomeTaxWithheldTotal": (706, 18, _N, _APP),
    "LocalIncomeTaxWithheldTotal": (724, 18, _N, _APP),
    "Blank4": (742, 4, _A, _NUL),
    "CombinedFederalStateCode": (746, 2, _A, _REQ),
    "Blank5": (748, 2, _A, _NUL),
})

# End of transmission "F" record
F_RECORD_LAYOUT = _layout({
    "RecordType": (0, 1, _A, _REQ),
    "NumberPayerRecords": (1, 8, _Z, _REQ),
    "Zero": (9, 21, _Z, _APP),
    "Blank2": (30, 19, _A, _NUL),
    "TotalNumberPayees": (49, 8, _Z, _APP),
    "Blank3": (57, 442, _A, _NUL),
    "RecordSequenceNumber": (499, 8, _Z, _REQ),
    "Blank4": (507, 241, _A, _NUL),
    "Blank5": (748, 2, _A, _NUL),
})