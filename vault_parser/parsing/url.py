"""Decoding of the hex-encoded entry URL."""
import re

from vault_parser.parsing.codec import hex_to_text

INVALID_HEX_MESSAGE = "ERROR: Invalid hexadecimal string."
DEFAULT_URL_MAX_LENGTH = 50

_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]+$")


def decode_url(
    url_hex: str, keep_full: bool, max_length: int = DEFAULT_URL_MAX_LENGTH
) -> str:
    """Decode an entry URL.

    Invalid input does not raise: the diagnostic message is returned in
    place of the URL so it shows up in the report.

    Parameters
    ----------
    url_hex : str
        The hex-encoded URL.
    keep_full : bool
        Whether to keep the whole URL or truncate it to `max_length`.
    max_length : int, optional
        Maximum number of characters kept when truncating.

    Returns
    -------
    str
        The decoded URL or `INVALID_HEX_MESSAGE`.

    """
    if not _HEX_PATTERN.fullmatch(url_hex) or len(url_hex) % 2:
        return INVALID_HEX_MESSAGE

    url = hex_to_text(url_hex)

    if keep_full:
        return url
    return url[:max_length]
