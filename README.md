# irsfire

Building blocks for working with IRS FIRE (Filing Information Returns
Electronically) files: the fixed-width, 750-character ASCII record format used
to submit 1099, 1098, 5498, W-2G and related information returns.

| Module                | What it holds                                                      |
|-----------------------|--------------------------------------------------------------------|
| `irsfire.constants`   | Record type letters, form names, indicator values and code tables  |
| `irsfire.spec`        | Field descriptions and the layouts of the T, A, B, C, K, F records |
| `irsfire.sublayouts`  | Layouts of the form-specific block of the B record (544–750)       |
| `irsfire.encrypter`   | AES-GCM and AES-CBC encryption of document contents                |
| `irsfire.storage`     | Saving and loading documents through a DB-API connection           |
| `irsfire.models`      | Dataclasses shaped like the JSON form of a FIRE file               |

## Installation

```
pip install irsfire
```

Python 3.10 or newer is required. The only runtime dependency is
`cryptography`.

## Constants

`irsfire.constants` gives the record types (`T_RECORD_TYPE` … `F_RECORD_TYPE`),
the extension block type of each form (`SUB_1099_MISC_TYPE`, `SUB_W2G_TYPE`, …),
`RECORD_LENGTH` (750) and `SUB_RECORD_LENGTH` (207), the indicator values, and
read-only tables:

- `TYPE_OF_RETURNS` — type-of-return code to form name (`"A"` → `"1099-MISC"`)
- `AMOUNT_CODES` — for each form, amount code to description
- `STATE_ABBREVIATION_CODES` and `PARTICIPATE_STATE_CODES` (CF/SF program states, keyed by int)
- `BTC_ISSUER_INDICATOR`, `BTC_CODE`, `BTC_BOND_TYPE`, `PAYMENT_CODES_1098F`
- `DISTRIBUTION_CODES` — a tuple of the 1099-R distribution codes

## Record layouts

`irsfire.spec` describes a field with a frozen `SpecField(start, length, type,
required)`. `type` is a `FieldType` (`ALPHANUMERIC`, `ALPHANUMERIC_RIGHT_ALIGN`,
`NUMERIC`, `ZERO_NUMERIC`, `TELEPHONE_NUMBER`, `PERCENT`, `EMAIL`, `DATE_YEAR`,
`DATE`) and `required` a `FieldProperty` (`NULLABLE`, `REQUIRED`, `APPLICABLE`,
`EXPANDABLE`, `OMITTED`). `SpecField.end` is the offset just past the field and
`SpecField.slice` cuts it out of a line.

The record layouts are read-only mappings of field name to `SpecField`:
`T_RECORD_LAYOUT`, `A_RECORD_LAYOUT`, `B_RECORD_LAYOUT`, `C_RECORD_LAYOUT`,
`K_RECORD_LAYOUT` and `F_RECORD_LAYOUT`. `irsfire.sublayouts` holds one layout
per form (`SUB_1099_MISC_LAYOUT`, `SUB_W2G_LAYOUT`, …) and `SUB_LAYOUTS`, which
maps each extension block type to its layout.

`to_specifications(fields_format)` returns the fields of a layout as a list of
`SpecRecord(key, name, field)` sorted by start offset, ties broken by name:

```python
from irsfire.spec import F_RECORD_LAYOUT, to_specifications

line = "F00000001" + " " * 741
for record in to_specifications(F_RECORD_LAYOUT):
    print(record.name, repr(line[record.field.slice]))
```

## Encryption

```python
from datetime import datetime, timezone

from irsfire.encrypter import generate_nonce, new_encrypt_service

service = new_encrypt_service("", "GCM")   # an empty key selects the built-in 32-byte default
nonce = generate_nonce("document-1", datetime.now(timezone.utc))

sealed = service.encrypt(b"exampleplaintext", nonce)
assert service.decrypt(sealed, nonce) == b"exampleplaintext"
```

- `create_key(key)` hex-encodes a key phrase; `new_encrypt_service` does this
  for you. Once decoded the key must be 16, 24 or 32 bytes.
- `generate_nonce(document_id, created)` hex-encodes the id followed by the
  creation time in Unix seconds.
- `"GCM"` authenticates the data; the hex-encoded nonce must decode to at least
  12 bytes and be the same for encrypt and decrypt.
- `"CBC"` puts a random IV in front of the ciphertext and needs a plaintext whose
  length is a multiple of 16; no padding is added and the nonce is not used.
- Any other method raises `UnknownEncryptionTypeError`. Bad hex, wrong key
  sizes, short nonces, failed authentication and malformed ciphertext raise
  `EncryptionError` (a `ValueError`).

## Document storage

`StorageService(db, encrypter=None)` works on a DB-API connection that uses the
`?` parameter style, such as `sqlite3`. It expects a `documents` table with the
columns `document_id`, `pdf`, `ascii`, `created_at` and `deleted_at`; it does
not create it.

```python
import sqlite3

from irsfire.encrypter import new_encrypt_service
from irsfire.storage import DocumentInformation, StorageService

db = sqlite3.connect(":memory:")
db.execute(
    "CREATE TABLE documents (document_id TEXT PRIMARY KEY, pdf BLOB, ascii BLOB,"
    " created_at TEXT, deleted_at TEXT)"
)

class Text:
    def ascii(self) -> bytes:
        return b"T2019..."

storage = StorageService(db, new_encrypt_service("", "GCM"))
document_id = storage.save(DocumentInformation(file=Text()))
document = storage.get(document_id)
```

- `save(doc)` stores what `doc.file.ascii()` returns and gives back the id. When
  `doc.document_id` is empty a random 40-character id is made with
  `rand_alphanumeric(length)`. With an encrypter, the content is encrypted with
  a nonce from the id and the creation time. `metadata` is not stored.
- `save` raises `NullFileError` when there is no document or no file, and
  `StorageError` when the insert affects no row.
- `get(document_id)` returns a `Document` with the content exactly as stored
  (still encrypted, if it was) and `created`/`deleted` as datetimes; it raises
  `DocumentNotFoundError` (also a `LookupError`) when no row matches.

## Data models

`irsfire.models` has dataclasses shaped like the JSON form of a FIRE file:
`File`, `PaymentPerson`, `TRecord`, `CRecord`, `KRecord`, `FRecord`,
`BRecordWith5498Sa` and `BRecordWithW2G`. `PaymentPerson.payer` and each entry
of `PaymentPerson.payees` are plain dicts.

```python
from irsfire.models import FRecord, from_json_dict, to_json_dict

end = from_json_dict(FRecord, {
    "record_type": "F",
    "number_of_payer_records": 1,
    "total_number_of_payees": 2,
    "record_sequence_number": 6,
})
assert to_json_dict(end)["record_type"] == "F"
```

- `to_json_dict(model)` leaves out optional fields that hold their zero value
  and writes timestamps as RFC 3339 text.
- `from_json_dict(model_class, data)` matches keys exactly or, failing that,
  ignoring case; unknown keys are skipped and `null` gives the zero value.
  Integer fields must fit in 32 bits, and values of the wrong JSON type raise
  `TypeError`.
- `new_api_response(response)` and `new_api_response_with_error(error_message)`
  build an `APIResponse`; its `response` and `payload` are left out of
  `to_json_dict`.

## What this package does not do

It describes the format but does not read or write whole FIRE files, check
record sequence numbers or totals, or turn records into PDF forms. It has no
command-line tool, no HTTP server or client, and does not create database
tables.

## Running the tests

```
pip install -e ".[test]"
pytest
```