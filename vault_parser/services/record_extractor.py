"""Record extraction component."""
from __future__ import annotations

from datetime import timezone
from typing import Iterable

from verboselogs import VerboseLogger

from vault_parser.config import Settings
from vault_parser.exceptions import InvalidTimestampError
from vault_parser.models import (
    EMPTY_DECODED_FIELD,
    DecodedField,
    FieldEncoding,
    Record,
    VaultEntry,
)
from vault_parser.parsing.cipher_mode import (
    classify_field,
    decode_cbc_field,
    field_encoding,
)
from vault_parser.parsing.timestamp import normalize_timestamp
from vault_parser.parsing.url import decode_url

INVALID_TIMESTAMP_MESSAGE = "ERROR: Invalid timestamp."

# Label reported for each sensitive field when it is empty.
DEFAULT_LABELS: dict[str, str] = {
    "name": "No Name",
    "group": "No Group",
    "extra": "No Extra",
    "username": "No UserName",
    "password": "No Password",
}


class RecordExtractor:
    """Turns vault entries into records, one per entry.

    Decoding failures are logged and reported in the record itself; they
    never stop the extraction.
    """

    def __init__(self, logger: VerboseLogger, settings: Settings | None = None):
        self.logger = logger
        self.settings = settings or Settings()

    def extract(
        self, entries: Iterable[VaultEntry], extract_all: bool = False
    ) -> tuple[Record, ...]:
        """Extract the records of every entry, in the given order.

        Parameters
        ----------
        entries : iterable of vault_parser.models.VaultEntry
            The entries read from the vault.
        extract_all : bool, optional
            Keep URLs untruncated.

        Returns
        -------
        tuple of vault_parser.models.Record

        """
        records = tuple(
            self.extract_entry(entry, extract_all=extract_all) for entry in entries
        )
        self.logger.verbose(f"Extracted {len(records)} records.")

        return records

    def extract_entry(self, entry: VaultEntry, extract_all: bool = False) -> Record:
        """Build the record of a single entry."""
        values: dict[str, str | FieldEncoding] = {}

        for field, label in DEFAULT_LABELS.items():
            raw = getattr(entry, field)
            decoded = self._decode_field(entry, field, raw)
            values[field] = raw
            values[f"{field}_cm"] = classify_field(raw, label)
            values[f"{field}_iv_hex"] = decoded.iv_hex
            values[f"{field}_ct_hex"] = decoded.ct_hex

        return Record(
            **values,
            url=decode_url(
                entry.url,
                keep_full=extract_all,
                max_length=self.settings.url_max_length,
            ),
            id=entry.id,
            secure_note=entry.secure_note,
            is_bookmark=entry.is_bookmark,
            never_autofill=entry.never_autofill,
            last_touch=self._timestamp(entry, "last_touch"),
            last_modified=self._timestamp(entry, "last_modified"),
            launch_count=entry.launch_count,
        )

    def _decode_field(self, entry: VaultEntry, field: str, raw: str) -> DecodedField:
        if field_encoding(raw) is not FieldEncoding.CBC:
            return EMPTY_DECODED_FIELD

        result = decode_cbc_field(raw)

        if not result.ok:
            self.logger.warning(
                f"Entry {entry.id or '?'}: failed decoding {field}: {result.error}"
            )
            return EMPTY_DECODED_FIELD
        return result.value

    def _timestamp(self, entry: VaultEntry, field: str) -> str:
        tz = timezone.utc if self.settings.timestamp_utc else None

        try:
            return normalize_timestamp(
                getattr(entry, field), fmt=self.settings.timestamp_format, tz=tz
            )
        except InvalidTimestampError as err:
            self.logger.warning(f"Entry {entry.id or '?'}: {field}: {err}")
            return INVALID_TIMESTAMP_MESSAGE
