"""Helper functions."""
from argparse import ArgumentParser, Namespace
from enum import Enum
from json import JSONEncoder, dumps
from pathlib import Path
from typing import Any, Sequence

import coloredlogs
from verboselogs import VerboseLogger

from vault_parser import __version__

LOG_LEVELS: list[str] = ["INFO", "VERBOSE", "DEBUG", "SPAM"]


class EnhancedJSONEncoder(JSONEncoder):
    """JSON encoder writing enumerations as their value."""

    def default(self, o: Any) -> Any:  # type: ignore[override]
        """Handle custom types JSON serialization."""
        if isinstance(o, Enum):
            return o.value
        return super().default(o)


def dump_to_file(
    logger: VerboseLogger, filename: str | Path, content: str | Any
) -> None:
    """Save data to local file.

    Parameters
    ----------
    logger : verboselogs.VerboseLogger
        The program's logger.
    filename : str or pathlib.Path
        The file to write to.
    content : str or Any
        The data to write. Anything but a string is serialized to JSON.

    Raises
    ------
    OSError
        If the file can't be written.

    """
    filepath = Path(filename)

    if not filepath.parent.exists():
        filepath.parent.mkdir(parents=True)

    if not isinstance(content, str):
        content = dumps(
            content,
            ensure_ascii=False,
            cls=EnhancedJSONEncoder,
            indent=4,
        )
    filepath.write_text(content, encoding="utf-8")

    logger.info(f"Successfully wrote '{str(filepath)}'.")


def parse_options(
    description: str, argv: Sequence[str] | None = None
) -> Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    description : str
        The program's description.
    argv : list of str, optional
        The arguments to parse. Defaults to `sys.argv`.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments as an object.

    """
    parser = ArgumentParser(description=description)

    parser.add_argument(
        "vault",
        type=str,
        help="the exported vault to process (XML)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILENAME",
        type=str,
        default=None,
        help="write the report to a file instead of printing a table "
        "(handled extensions: .csv, .json, .html)",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="extract_all",
        action="store_true",
        help="report every field and keep URLs untruncated",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase logs output verbosity (default: info, -v: verbose, "
        "-vv: debug, -vvv: spam)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def init_logger(
    name: str,
    verbosity_level: int | str = 0,
    formatting: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> VerboseLogger:
    """Initialize the program's logger.

    Parameters
    ----------
    name : str
        The logger's name.
    verbosity_level : int or str, optional
        Either the number of `-v` flags or a level name.
    formatting : str, optional
        The log format.

    Returns
    -------
    verboselogs.VerboseLogger
        The logger.

    """
    if isinstance(verbosity_level, int):
        level = LOG_LEVELS[min(verbosity_level, len(LOG_LEVELS) - 1)]
    else:
        level = verbosity_level.upper()

    logger = VerboseLogger(name)

    coloredlogs.install(
        logger=logger,
        level=level,
        fmt=formatting,
    )

    return logger
