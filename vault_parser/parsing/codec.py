"""Hexadecimal and base64 conversions."""
from base64 import b64decode
from binascii import Error as BinasciiError

from vault_parser.exceptions import FieldDecodingError


def hex_to_text(hex_string: str) -> str:
    """Decode a string of hex digit pairs, one character per byte.

    The input is expected to be valid: even length, hex digits only.

    Parameters
    ----------
    hex_string : str
        The hex-encoded text.

    Returns
    -------
    str
        The decoded text.

    """
    return bytes.fromhex(hex_string).decode("latin-1")


def base64_to_hex(b64_string: str) -> str:
    """Decode standard base64 and re-encode the bytes as uppercase hex.

    Parameters
    ----------
    b64_string : str
        The base64 payload.

    Returns
    -------
    str
        Two uppercase hex digits per decoded byte, no separator.

    Raises
    ------
    vault_parser.exceptions.FieldDecodingError
        If the payload is not valid base64.

    """
    try:
        raw = b64decode(b64_string, validate=True)
    except (BinasciiError, ValueError) as err:
        raise FieldDecodingError(f"Invalid base64 value '{b64_string}': {err}") from err

    return raw.hex().upper()
