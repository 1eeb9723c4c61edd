import json
from datetime import datetime, timedelta, timezone

import pytest

from irsfire.models import (
    APIResponse,
    BRecordWith5498Sa,
    BRecordWithW2G,
    CRecord,
    File,
    FRecord,
    KRecord,
    PaymentPerson,
    TRecord,
    from_json_dict,
    new_api_response,
    new_api_response_with_error,
    to_json_dict,
)


def _sample_file():
    return File(
        transmitter=TRecord(
            record_type="T",
            payment_year=2019,
            transmitter_tin="123456789",
            transmitter_control_code="12345",
            transmitter_name="Example Transmitter",
            company_name="Example Company",
            company_mailing_address="1 Main St",
            company_city="Springfield",
            company_state="NY",
            company_zip_code="123456789",
            total_number_of_payees=1,
            contact_name="Contact",
            contact_telephone_number_and_ext="5550000",
            contact_email_address="contact@example.com",
            record_sequence_number=1,
            vendor_indicator="I",
        ),
        payment_persons=[
            PaymentPerson(
                payer={"record_type": "A", "type_of_return": "A"},
                payees=[{"record_type": "B", "payment_amount_1": 100}],
                end_payer=CRecord(record_type="C", number_of_payees=1, control_total_1=100,
                                  record_sequence_number=4),
                states=[KRecord(record_type="K", number_of_payees=1, control_total_1=100,
                                record_sequence_number=5, combined_federal_state_code="34")],
            )
        ],
        end_transmitter=FRecord(record_type="F", number_of_payer_records=1,
                                total_number_of_payees=1, record_sequence_number=6),
    )


def test_empty_optional_fields_are_left_out():
    assert to_json_dict(FRecord()) == {"record_type": "", "record_sequence_number": 0}


def test_t_record_round_trip():
    record = _sample_file().transmitter
    assert from_json_dict(TRecord, to_json_dict(record)) == record


def test_control_total_uses_upper_case_json_name():
    record = KRecord(control_total_a=7, combined_federal_state_code="06")
    data = to_json_dict(record)
    assert data["control_total_A"] == 7
    assert data["combined_federal_state_code"] == "06"
    assert "control_total_B" not in data


def test_keys_match_ignoring_case():
    record = from_json_dict(CRecord, {"control_total_a": 5, "RECORD_TYPE": "C"})
    assert record.control_total_a == 5
    assert record.record_type == "C"


def test_null_and_unknown_keys_keep_defaults():
    record = from_json_dict(FRecord, {"record_type": None, "unknown": 3})
    assert record == FRecord()


@pytest.mark.parametrize("value", ["2020", True, 2020.0, [2020]])
def test_wrong_type_for_integer_raises(value):
    with pytest.raises(TypeError):
        from_json_dict(TRecord, {"payment_year": value})


def test_wrong_type_for_string_raises():
    with pytest.raises(TypeError):
        from_json_dict(TRecord, {"transmitter_name": 12})


def test_int32_overflow_raises():
    with pytest.raises(ValueError):
        from_json_dict(CRecord, {"control_total_1": 2**31})
    assert from_json_dict(CRecord, {"control_total_1": 2**31 - 1}).control_total_1 == 2**31 - 1


def test_w2g_zero_date_is_always_written():
    data = to_json_dict(BRecordWithW2G())
    assert data["date_won"] == "0001-01-01T00:00:00Z"
    assert data["type_wager_code"] == ""


def test_w2g_date_written_as_utc_timestamp():
    record = BRecordWithW2G(date_won=datetime(2020, 5, 17, tzinfo=timezone.utc))
    assert to_json_dict(record)["date_won"] == "2020-05-17T00:00:00Z"


@pytest.mark.parametrize(
    "moment",
    [
        datetime(2021, 3, 4, 5, 6, 7, 500000, tzinfo=timezone.utc),
        datetime(2021, 3, 4, 5, 6, 7, 123456, tzinfo=timezone(timedelta(hours=-5, minutes=-30))),
        datetime(1999, 12, 31, 23, 59, 59, tzinfo=timezone(timedelta(hours=9))),
    ],
)
def test_w2g_date_round_trip(moment):
    record = BRecordWithW2G(record_type="B", type_wager_code="A", date_won=moment, race="7")
    decoded = from_json_dict(BRecordWithW2G, json.loads(json.dumps(to_json_dict(record))))
    assert decoded == record
    assert decoded.date_won.utcoffset() == moment.utcoffset()


def test_bad_timestamp_raises():
    with pytest.raises(ValueError):
        from_json_dict(BRecordWithW2G, {"date_won": "yesterday"})
    with pytest.raises(TypeError):
        from_json_dict(BRecordWithW2G, {"date_won": 20200517})


def test_5498_sa_round_trip_and_field_order():
    record = BRecordWith5498Sa(record_type="B", payment_year=2019, payees_tin="111111111",
                               payment_amount_j=9, hsa_indicator="1")
    data = to_json_dict(record)
    assert list(data)[:2] == ["record_type", "payment_year"]
    assert data["payment_amount_J"] == 9
    assert from_json_dict(BRecordWith5498Sa, data) == record


def test_file_round_trip_through_json_text():
    original = _sample_file()
    text = json.dumps(to_json_dict(original))
    assert from_json_dict(File, json.loads(text)) == original


def test_empty_file_leaves_out_payment_persons():
    data = to_json_dict(File())
    assert "payment_persons" not in data
    assert data["transmitter"] == to_json_dict(TRecord())
    assert data["end_transmitter"] == to_json_dict(FRecord())


def test_payment_person_without_lists_keeps_payer_and_end_payer():
    data = to_json_dict(PaymentPerson())
    assert set(data) == {"payer", "end_payer"}
    assert data["payer"] == {}


def test_list_field_must_be_a_list():
    with pytest.raises(TypeError):
        from_json_dict(PaymentPerson, {"states": {"record_type": "K"}})
    with pytest.raises(TypeError):
        from_json_dict(PaymentPerson, {"payees": ["B"]})


def test_null_list_item_becomes_empty_record():
    person = from_json_dict(PaymentPerson, {"states": [None]})
    assert person.states == [KRecord()]


def test_from_json_dict_rejects_non_models_and_non_mappings():
    with pytest.raises(TypeError):
        from_json_dict(dict, {})
    with pytest.raises(TypeError):
        from_json_dict(FRecord, ["F"])
    with pytest.raises(TypeError):
        to_json_dict({"record_type": "F"})


def test_api_response_with_error():
    response = new_api_response_with_error("boom")
    assert response.message == "boom"
    assert response.response is None
    assert to_json_dict(response) == {"message": "boom"}


def test_api_response_wraps_http_response_and_hides_it():
    raw = object()
    response = new_api_response(raw)
    assert response.response is raw
    assert to_json_dict(response) == {}


def test_api_response_request_url_is_written_as_url():
    response = APIResponse(request_url="http://localhost/files", method="GET", payload=b"data")
    data = to_json_dict(response)
    assert data == {"url": "http://localhost/files", "method": "GET"}
    decoded = from_json_dict(APIResponse, data)
    assert decoded.request_url == "http://localhost/files"
    assert decoded.payload == b""