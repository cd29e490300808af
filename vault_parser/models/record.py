"""Data model to define the record extracted from a vault entry."""
from dataclasses import dataclass, fields
from enum import Enum


class FieldEncoding(Enum):
    """How a sensitive field is stored in the export."""

    PLAINTEXT = "Plaintext"
    ECB = "ECB"
    CBC = "CBC"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DecodedField:
    """IV and ciphertext of a CBC field, both as uppercase hex."""

    iv_hex: str
    ct_hex: str


EMPTY_DECODED_FIELD = DecodedField(iv_hex="", ct_hex="")


@dataclass(frozen=True)
class Record:
    """Class defining the flattened result for one vault entry.

    The `*_cm` attributes hold the cipher mode of the field, or the
    "No <Field>" label when the field is empty. The `*_iv_hex` and
    `*_ct_hex` attributes are only filled for CBC fields.

    """

    name: str = ""
    name_cm: FieldEncoding | str = ""
    name_iv_hex: str = ""
    name_ct_hex: str = ""
    url: str = ""
    id: str = ""
    group: str = ""
    group_cm: FieldEncoding | str = ""
    group_iv_hex: str = ""
    group_ct_hex: str = ""
    extra: str = ""
    extra_cm: FieldEncoding | str = ""
    extra_iv_hex: str = ""
    extra_ct_hex: str = ""
    secure_note: str = ""
    is_bookmark: str = ""
    never_autofill: str = ""
    last_touch: str = ""
    last_modified: str = ""
    launch_count: str = ""
    username: str = ""
    username_cm: FieldEncoding | str = ""
    username_iv_hex: str = ""
    username_ct_hex: str = ""
    password: str = ""
    password_cm: FieldEncoding | str = ""
    password_iv_hex: str = ""
    password_ct_hex: str = ""

    def as_row(self) -> dict[str, str | FieldEncoding]:
        """Return the record keyed by report column name."""
        return {COLUMN_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}


# Report column name for each Record attribute, in report order.
COLUMN_NAMES: dict[str, str] = {
    "name": "Name",
    "name_cm": "NameCM",
    "name_iv_hex": "NameIVHex",
    "name_ct_hex": "NameCTHex",
    "url": "URL",
    "id": "ID",
    "group": "Group",
    "group_cm": "GroupCM",
    "group_iv_hex": "GroupIVHex",
    "group_ct_hex": "GroupCTHex",
    "extra": "Extra",
    "extra_cm": "ExtraCM",
    "extra_iv_hex": "ExtraIVHex",
    "extra_ct_hex": "ExtraCTHex",
    "secure_note": "SNote",
    "is_bookmark": "IsBookmark",
    "never_autofill": "NeverAutofill",
    "last_touch": "LastTouch",
    "last_modified": "LastModified",
    "launch_count": "LaunchCount",
    "username": "UserName",
    "username_cm": "UserNameCM",
    "username_iv_hex": "UserNameIVHex",
    "username_ct_hex": "UserNameCTHex",
    "password": "Password",
    "password_cm": "PasswordCM",
    "password_iv_hex": "PasswordIVHex",
    "password_ct_hex": "PasswordCTHex",
}

ALL_COLUMNS: list[str] = list(COLUMN_NAMES.values())

DEFAULT_COLUMNS: list[str] = [
    "URL",
    "ID",
    "NameCM",
    "UserNameCM",
    "PasswordCM",
    "ExtraCM",
    "SNote",
    "LastTouch",
    "LastModified",
]
