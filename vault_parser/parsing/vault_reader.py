"""Reader for XML vault exports."""
from __future__ import annotations

from pathlib import Path
from typing import Iterator
from xml.etree.ElementTree import Element, ParseError

from defusedxml import ElementTree as DefusedET
from defusedxml.common import DefusedXmlException
from verboselogs import VerboseLogger

from vault_parser.exceptions import (
    VaultFormatError,
    VaultNotFoundError,
    VaultReadError,
)
from vault_parser.models import VaultEntry

# VaultEntry attribute for each `account` XML attribute.
ACCOUNT_ATTRIBUTES: dict[str, str] = {
    "name": "name",
    "url": "url",
    "group": "group",
    "extra": "extra",
    "sn": "secure_note",
    "id": "id",
    "isbookmark": "is_bookmark",
    "never_autofill": "never_autofill",
    "last_touch": "last_touch",
    "last_modified": "last_modified",
    "launch_count": "launch_count",
}
LOGIN_ATTRIBUTES: dict[str, str] = {
    "u": "username",
    "p": "password",
}


def entry_from_element(account: Element) -> VaultEntry:
    """Build a vault entry from an `account` element."""
    values = {
        attr: account.get(xml_name, "")
        for xml_name, attr in ACCOUNT_ATTRIBUTES.items()
    }
    login = account.find("login")

    for xml_name, attr in LOGIN_ATTRIBUTES.items():
        values[attr] = login.get(xml_name, "") if login is not None else ""

    return VaultEntry(**values)


def iter_accounts(root: Element) -> Iterator[Element]:
    """Yield every `account` element of every `accounts` collection."""
    for accounts in root.iter("accounts"):
        yield from accounts.findall("account")


class VaultReader:
    """Loads a whole vault export in memory and lists its entries."""

    def __init__(self, logger: VerboseLogger):
        self.logger = logger

    def read(self, filename: str | Path) -> list[VaultEntry]:
        """Parse a vault export.

        Parameters
        ----------
        filename : str or pathlib.Path
            The XML export to read.

        Returns
        -------
        list of vault_parser.models.VaultEntry
            The entries, in document order.

        Raises
        ------
        vault_parser.exceptions.VaultNotFoundError
            If the file does not exist.
        vault_parser.exceptions.VaultReadError
            If the file can't be read.
        vault_parser.exceptions.VaultFormatError
            If the file is not well-formed XML or uses forbidden constructs.

        """
        path = Path(filename)

        if not path.is_file():
            raise VaultNotFoundError(f"Vault file not found: {path}")

        self.logger.verbose(f"Reading vault '{path}' ...")

        try:
            root = DefusedET.parse(str(path)).getroot()
        except (ParseError, DefusedXmlException) as err:
            raise VaultFormatError(f"Failed parsing '{path}': {err}") from err
        except OSError as err:
            raise VaultReadError(f"Failed reading '{path}': {err}") from err

        entries = [entry_from_element(account) for account in iter_accounts(root)]
        self.logger.debug(f"Found {len(entries)} account entries in '{path}'.")

        return entries
