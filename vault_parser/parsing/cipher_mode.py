"""Cipher mode detection and CBC payload splitting."""
from vault_parser.exceptions import FieldDecodingError
from vault_parser.models import DecodedField, FieldEncoding, FieldResult
from vault_parser.parsing.codec import base64_to_hex

CBC_SENTINEL = "!"
IV_SEPARATOR = "|"


def field_encoding(raw_value: str) -> FieldEncoding:
    """Return the encoding of a raw field value."""
    if not raw_value:
        return FieldEncoding.PLAINTEXT
    if raw_value.startswith(CBC_SENTINEL):
        return FieldEncoding.CBC
    return FieldEncoding.ECB


def classify_field(raw_value: str, default_label: str) -> FieldEncoding | str:
    """Classify a field, or return `default_label` if it is empty.

    Parameters
    ----------
    raw_value : str
        The field value as found in the export.
    default_label : str
        The label standing for a missing field, e.g. "No UserName".

    Returns
    -------
    vault_parser.models.FieldEncoding or str
        `FieldEncoding.CBC` or `FieldEncoding.ECB`, or the default label.

    """
    encoding = field_encoding(raw_value)

    if encoding is FieldEncoding.PLAINTEXT:
        return default_label
    return encoding


def split_iv_ciphertext(raw_value: str) -> DecodedField:
    """Split a CBC field into its IV and ciphertext, both as hex.

    The leading sentinel character is dropped and the remainder must hold
    exactly one separator between the base64 IV and the base64 ciphertext.

    Raises
    ------
    vault_parser.exceptions.FieldDecodingError
        If the separator count is not one or either half is not base64.

    """
    parts = raw_value[1:].split(IV_SEPARATOR)

    if len(parts) != 2:
        raise FieldDecodingError(
            f"Expected one '{IV_SEPARATOR}' separator, found {len(parts) - 1}."
        )
    iv_b64, ct_b64 = parts

    return DecodedField(iv_hex=base64_to_hex(iv_b64), ct_hex=base64_to_hex(ct_b64))


def decode_cbc_field(raw_value: str) -> FieldResult[DecodedField]:
    """Best-effort version of `split_iv_ciphertext`, never raises."""
    try:
        return FieldResult.success(split_iv_ciphertext(raw_value))
    except FieldDecodingError as err:
        return FieldResult.failure(str(err))
