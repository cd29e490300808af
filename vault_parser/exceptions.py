"""Exceptions raised while reading, decoding and reporting on a vault."""


class VaultParserError(Exception):
    """Base class for every error raised by this package."""


class VaultReadError(VaultParserError):
    """The vault file to process can't be read."""


class VaultNotFoundError(VaultReadError):
    """The vault file to process does not exist."""


class VaultFormatError(VaultParserError):
    """The vault file is not a well-formed XML document."""


class UnsupportedFormatError(VaultParserError):
    """The requested output file extension has no renderer."""


class FieldDecodingError(VaultParserError):
    """A single field value could not be decoded."""


class InvalidTimestampError(VaultParserError):
    """A timestamp field is not an integer number of seconds."""
