"""Data model to define an account entry read from a vault export."""
from dataclasses import dataclass


@dataclass(frozen=True)
class VaultEntry:
    """Class defining one `account` node of an exported vault.

    Every attribute holds the raw string found in the export. An attribute
    missing from the document is an empty string.

    Attributes
    ----------
    name : str
        The entry name, encrypted or empty.
    url : str
        The site URL, hex-encoded.
    group : str
        The folder the entry belongs to, encrypted or empty.
    extra : str
        The entry notes, encrypted or empty.
    secure_note : str
        The secure note flag ("0" or "1").
    id : str
        The entry identifier.
    is_bookmark : str
        The bookmark flag.
    never_autofill : str
        The "never autofill" flag.
    last_touch : str
        Last access time in seconds since the Unix epoch.
    last_modified : str
        Last modification time in seconds since the Unix epoch.
    launch_count : str
        How many times the entry was launched.
    username : str
        The login username, encrypted or empty.
    password : str
        The login password, encrypted or empty.

    """

    name: str = ""
    url: str = ""
    group: str = ""
    extra: str = ""
    secure_note: str = ""
    id: str = ""
    is_bookmark: str = ""
    never_autofill: str = ""
    last_touch: str = ""
    last_modified: str = ""
    launch_count: str = ""
    username: str = ""
    password: str = ""
