"""Conversion of epoch-seconds timestamps to readable dates."""
from datetime import datetime, timedelta, timezone, tzinfo

from vault_parser.exceptions import InvalidTimestampError

UNSET_TIMESTAMP = "0"
DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def normalize_timestamp(
    epoch_seconds: str,
    fmt: str = DEFAULT_TIMESTAMP_FORMAT,
    tz: tzinfo | None = None,
) -> str:
    """Format a Unix timestamp as a calendar date-time.

    Parameters
    ----------
    epoch_seconds : str
        Seconds since 1970-01-01T00:00:00 UTC. "0" means the event never
        happened and is returned unchanged. An empty value stays empty.
    fmt : str, optional
        The `strftime` format of the result.
    tz : datetime.tzinfo, optional
        The zone to express the date in. Defaults to the local zone.

    Returns
    -------
    str
        The formatted date, "0" or "".

    Raises
    ------
    vault_parser.exceptions.InvalidTimestampError
        If the value is not an integer or is out of the supported range.

    """
    if epoch_seconds == UNSET_TIMESTAMP:
        return UNSET_TIMESTAMP
    if not epoch_seconds:
        return ""

    try:
        seconds = int(epoch_seconds.strip())
        moment = (EPOCH + timedelta(seconds=seconds)).astimezone(tz)
    except (ValueError, OverflowError, OSError) as err:
        raise InvalidTimestampError(
            f"Invalid timestamp '{epoch_seconds}': {err}"
        ) from err

    return moment.strftime(fmt)
