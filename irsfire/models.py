"""JSON models of the FIRE records exchanged over the HTTP API."""

import functools
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, get_args, get_origin

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

# The zero value of a timestamp: January 1 of year 1, UTC.
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIME_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


def _json(name: str | None, default: Any = None, *, omitempty: bool = False, factory: Any = None) -> Any:
    metadata = {"json": name, "omitempty": omitempty}
    if factory is not None:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


@dataclass
class TRecord:
    """Transmitter "T" record."""

    record_type: str = _json("record_type", "")
    payment_year: int = _json("payment_year", 0)
    prior_year_data_indicator: str = _json("prior_year_data_indicator", "", omitempty=True)
    transmitter_tin: str = _json("transmitter_tin", "")
    transmitter_control_code: str = _json("transmitter_control_code", "")
    test_file_indicator: str = _json("test_file_indicator", "", omitempty=True)
    foreign_entity_indicator: str = _json("foreign_entity_indicator", "", omitempty=True)
    transmitter_name: str = _json("transmitter_name", "")
    transmitter_name_contd: str = _json("transmitter_name_contd", "", omitempty=True)
    company_name: str = _json("company_name", "")
    company_name_contd: str = _json("company_name_contd", "", omitempty=True)
    company_mailing_address: str = _json("company_mailing_address", "")
    company_city: str = _json("company_city", "")
    company_state: str = _json("company_state", "")
    company_zip_code: str = _json("company_zip_code", "")
    total_number_of_payees: int = _json("total_number_of_payees", 0, omitempty=True)
    contact_name: str = _json("contact_name", "")
    contact_telephone_number_and_ext: str = _json("contact_telephone_number_and_ext", "")
    contact_email_address: str = _json("contact_email_address", "", omitempty=True)
    record_sequence_number: int = _json("record_sequence_number", 0)
    vendor_indicator: str = _json("vendor_indicator", "")
    vendor_name: str = _json("vendor_name", "", omitempty=True)
    vendor_mailing_address: str = _json("vendor_mailing_address", "", omitempty=True)
    vendor_city: str = _json("vendor_city", "", omitempty=True)
    vendor_state: str = _json("vendor_state", "", omitempty=True)
    vendor_zip_code: str = _json("vendor_zip_code", "", omitempty=True)
    vendor_contact_name: str = _json("vendor_contact_name", "", omitempty=True)
    vendor_contact_telephone_and_ext: str = _json("vendor_contact_telephone_and_ext", "", omitempty=True)
    vendor_foreign_entity_indicator: str = _json("vendor_foreign_entity_indicator", "", omitempty=True)


@dataclass
class _ControlTotalRecord:
    record_type: str = _json("record_type", "")
    number_of_payees: int = _json("number_of_payees", 0, omitempty=True)
    control_total_1: int = _json("control_total_1", 0, omitempty=True)
    control_total_2: int = _json("control_total_2", 0, omitempty=True)
    control_total_3: int = _json("control_total_3", 0, omitempty=True)
    control_total_4: int = _json("control_total_4", 0, omitempty=True)
    control_total_5: int = _json("control_total_5", 0, omitempty=True)
    control_total_6: int = _json("control_total_6", 0, omitempty=True)
    control_total_7: int = _json("control_total_7", 0, omitempty=True)
    control_total_8: int = _json("control_total_8", 0, omitempty=True)
    control_total_9: int = _json("control_total_9", 0, omitempty=True)
    control_total_a: int = _json("control_total_A", 0, omitempty=True)
    control_total_b: int = _json("control_total_B", 0, omitempty=True)
    control_total_c: int = _json("control_total_C", 0, omitempty=True)
    control_total_d: int = _json("control_total_D", 0, omitempty=True)
    control_total_e: int = _json("control_total_E", 0, omitempty=True)
    control_total_f: int = _json("control_total_F", 0, omitempty=True)
    control_total_g: int = _json("control_total_G", 0, omitempty=True)
    control_total_h: int = _json("control_total_H", 0, omitempty=True)
    control_total_j: int = _json("control_total_J", 0, omitempty=True)
    record_sequence_number: int = _json("record_sequence_number", 0)


@dataclass
class CRecord(_ControlTotalRecord):
    """End of payer "C" record."""


@dataclass
class KRecord(_ControlTotalRecord):
    """State totals "K" record."""

    state_income_tax_withheld_total: str = _json("state_income_tax_withheld_total", "", omitempty=True)
    local_income_tax_withheld_total: str = _json("local_income_tax_withheld_total", "", omitempty=True)
    combined_federal_state_code: str = _json("combined_federal_state_code", "")


@dataclass
class FRecord:
    """End of transmission "F" record."""

    record_type: str = _json("record_type", "")
    number_of_payer_records: int = _json("number_of_payer_records", 0, omitempty=True)
    total_number_of_payees: int = _json("total_number_of_payees", 0, omitempty=True)
    record_sequence_number: int = _json("record_sequence_number", 0)


@dataclass
class _PayeeRecord:
    record_type: str = _json("record_type", "")
    payment_year: int = _json("payment_year", 0)
    corrected_return_indicator: str = _json("corrected_return_indicator", "", omitempty=True)
    payees_name_control: str = _json("payees_name_control", "", omitempty=True)
    type_of_tin: str = _json("type_of_tin", "", omitempty=True)
    payees_tin: str = _json("payees_tin", "")
    payers_account_number_for_payee: str = _json("payers_account_number_for_payee", "", omitempty=True)
    payers_office_code: str = _json("payers_office_code", "", omitempty=True)
    payment_amount_1: int = _json("payment_amount_1", 0, omitempty=True)
    payment_amount_2: int = _json("payment_amount_2", 0, omitempty=True)
    payment_amount_3: int = _json("payment_amount_3", 0, omitempty=True)
    payment_amount_4: int = _json("payment_amount_4", 0, omitempty=True)
    payment_amount_5: int = _json("payment_amount_5", 0, omitempty=True)
    payment_amount_6: int = _json("payment_amount_6", 0, omitempty=True)
    payment_amount_7: int = _json("payment_amount_7", 0, omitempty=True)
    payment_amount_8: int = _json("payment_amount_8", 0, omitempty=True)
    payment_amount_9: int = _json("payment_amount_9", 0, omitempty=True)
    payment_amount_a: int = _json("payment_amount_A", 0, omitempty=True)
    payment_amount_b: int = _json("payment_amount_B", 0, omitempty=True)
    payment_amount_c: int = _json("payment_amount_C", 0, omitempty=True)
    payment_amount_d: int = _json("payment_amount_D", 0, omitempty=True)
    payment_amount_e: int = _json("payment_amount_E", 0, omitempty=True)
    payment_amount_f: int = _json("payment_amount_F", 0, omitempty=True)
    payment_amount_g: int = _json("payment_amount_G", 0, omitempty=True)
    payment_amount_h: int = _json("payment_amount_H", 0, omitempty=True)
    payment_amount_j: int = _json("payment_amount_J", 0, omitempty=True)
    foreign_country_indicator: str = _json("foreign_country_indicator", "", omitempty=True)
    first_payee_name_line: str = _json("first_payee_name_line", "")
    second_payee_name_line: str = _json("second_payee_name_line", "", omitempty=True)
    payee_mailing_address: str = _json("payee_mailing_address", "")
    payee_city: str = _json("payee_city", "")
    payee_state: str = _json("payee_state", "")
    payee_zip_code: str = _json("payee_zip_code", "")
    record_sequence_number: int = _json("record_sequence_number", 0)


@dataclass
class BRecordWith5498Sa(_PayeeRecord):
    """Payee "B" record carrying the form 5498-SA extension block."""

    medicare_advantage_msa_indicator: str = _json("medicare_advantage_msa_indicator", "", omitempty=True)
    archer_mas_indicator: str = _json("archer_mas_indicator", "", omitempty=True)
    hsa_indicator: str = _json("hsa_indicator", "", omitempty=True)
    special_data_entries: str = _json("special_data_entries", "", omitempty=True)


@dataclass
class BRecordWithW2G(_PayeeRecord):
    """Payee "B" record carrying the form W-2G extension block."""

    type_wager_code: str = _json("type_wager_code", "")
    date_won: datetime = _json("date_won", _ZERO_TIME)
    transaction: str = _json("transaction", "", omitempty=True)
    race: str = _json("race", "", omitempty=True)
    cashier: str = _json("cashier", "", omitempty=True)
    window: str = _json("window", "", omitempty=True)
    first_id: str = _json("first_id", "", omitempty=True)
    second_id: str = _json("second_id", "", omitempty=True)
    special_data_entries: str = _json("special_data_entries", "", omitempty=True)
    state_income_tax_withheld: int = _json("state_income_tax_withheld", 0, omitempty=True)
    local_income_tax_withheld: int = _json("local_income_tax_withheld", 0, omitempty=True)


@dataclass
class PaymentPerson:
    """A payer with its payees, end of payer totals and state totals."""

    payer: dict[str, Any] = _json("payer", factory=dict)
    payees: list[dict[str, Any]] = _json("payees", omitempty=True, factory=list)
    end_payer: CRecord = _json("end_payer", factory=CRecord)
    states: list[KRecord] = _json("states", omitempty=True, factory=list)


@dataclass
class File:
    """A whole transmission: transmitter, payment persons and end of transmission."""

    transmitter: TRecord = _json("transmitter", factory=TRecord)
    payment_persons: list[PaymentPerson] = _json("payment_persons", omitempty=True, factory=list)
    end_transmitter: FRecord = _json("end_transmitter", factory=FRecord)


@dataclass
class APIResponse:
    """What the server answered, with the request it answered."""

    response: Any = _json(None, None)
    message: str = _json("message", "", omitempty=True)
    operation: str = _json("operation", "", omitempty=True)
    request_url: str = _json("url", "", omitempty=True)
    method: str = _json("method", "", omitempty=True)
    payload: bytes = _json(None, b"")


def new_api_response(response: Any) -> APIResponse:
    """Wrap an HTTP response."""
    return APIResponse(response=response)


def new_api_response_with_error(error_message: str) -> APIResponse:
    """Build a response that carries only an error message."""
    return APIResponse(message=error_message)


def _format_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(text: str, name: str) -> datetime:
    match = _TIME_PATTERN.match(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as a timestamp for field {name}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    microsecond = int((fraction or "")[:6].ljust(6, "0"))
    if zone in ("Z", "z"):
        tzinfo = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tzinfo = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), microsecond, tzinfo=tzinfo
    )


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (str, int, list, dict, bytes)) and not value


def _encode(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_json_dict(value)
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, list):
        return [_encode(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _encode(item) for key, item in value.items()}
    return value


def to_json_dict(model: Any) -> dict[str, Any]:
    """Render a model as a JSON-ready dict, leaving out empty optional fields."""
    if not is_dataclass(model) or isinstance(model, type):
        raise TypeError(f"cannot encode {type(model).__name__} as a model")
    result: dict[str, Any] = {}
    for model_field in fields(model):
        name = model_field.metadata.get("json")
        if name is None:
            continue
        value = getattr(model, model_field.name)
        if model_field.metadata.get("omitempty") and _is_empty(value):
            continue
        result[name] = _encode(value)
    return result


@functools.lru_cache(maxsize=None)
def _json_fields(model_class: type) -> tuple[dict[str, Any], dict[str, Any]]:
    exact: dict[str, Any] = {}
    folded: dict[str, Any] = {}
    for model_field in fields(model_class):
        name = model_field.metadata.get("json")
        if name is None or not model_field.init:
            continue
        exact[name] = model_field
        folded.setdefault(name.casefold(), model_field)
    return exact, folded


def _zero(hint: Any) -> Any:
    origin = get_origin(hint)
    if origin is list:
        return []
    if origin is dict or hint is dict:
        return {}
    if isinstance(hint, type) and is_dataclass(hint):
        return hint()
    if hint is str:
        return ""
    if hint is int:
        return 0
    if hint is datetime:
        return _ZERO_TIME
    return None


def _decode(hint: Any, value: Any, name: str) -> Any:
    if value is None:
        return _zero(hint)
    origin = get_origin(hint)
    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"cannot decode {type(value).__name__} into list field {name}")
        (item_hint,) = get_args(hint)
        return [_decode(item_hint, item, name) for item in value]
    if origin is dict or hint is dict:
        if not isinstance(value, Mapping):
            raise TypeError(f"cannot decode {type(value).__name__} into object field {name}")
        return dict(value)
    if isinstance(hint, type) and is_dataclass(hint):
        return from_json_dict(hint, value)
    if hint is str:
        if not isinstance(value, str):
            raise TypeError(f"cannot decode {type(value).__name__} into string field {name}")
        return value
    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"cannot decode {type(value).__name__} into int32 field {name}")
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"number {value} overflows int32 field {name}")
        return value
    if hint is datetime:
        if not isinstance(value, str):
            raise TypeError(f"cannot decode {type(value).__name__} into timestamp field {name}")
        return _parse_time(value, name)
    return value


def from_json_dict(model_class: type, data: Mapping[str, Any]) -> Any:
    """Build a model from decoded JSON; keys match exactly or else ignoring case."""
    if not (isinstance(model_class, type) and is_dataclass(model_class)):
        raise TypeError(f"{model_class!r} is not a model class")
    if not isinstance(data, Mapping):
        raise TypeError(f"cannot decode {type(data).__name__} into {model_class.__name__}")
    exact, folded = _json_fields(model_class)
    values: dict[str, Any] = {}
    for key, value in data.items():
        model_field = exact.get(key) or folded.get(str(key).casefold())
        if model_field is None:
            continue
        values[model_field.name] = _decode(model_field.type, value, model_field.metadata["json"])
    return model_class(**values)