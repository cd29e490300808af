"""Password-manager vault export parser."""
import sys
from argparse import Namespace
from typing import Sequence

from dependency_injector.wiring import Provide, inject
from pydantic import ValidationError
from verboselogs import VerboseLogger

from vault_parser.containers import AppContainer
from vault_parser.exceptions import (
    UnsupportedFormatError,
    VaultFormatError,
    VaultReadError,
)
from vault_parser.helpers import parse_options
from vault_parser.parsing.vault_reader import VaultReader
from vault_parser.rendering.report_renderer import ReportRenderer, resolve_format
from vault_parser.services.record_extractor import RecordExtractor


@inject
def main(
    args: Namespace,
    logger: VerboseLogger = Provide[AppContainer.logger],
    vault_reader: VaultReader = Provide[AppContainer.vault_reader],
    record_extractor: RecordExtractor = Provide[AppContainer.record_extractor],
    report_renderer: ReportRenderer = Provide[AppContainer.report_renderer],
) -> int:
    """Program's entrypoint.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments.

    Returns
    -------
    int
        The process exit status.

    """
    try:
        # Output extension is checked before the vault is read.
        resolve_format(args.output)
        entries = vault_reader.read(args.vault)

    except UnsupportedFormatError as err:
        logger.error(f"Invalid output file '{args.output}': {err}")
        return 1

    except (VaultReadError, VaultFormatError) as err:
        logger.error(f"Failed reading {args.vault}: {err}")
        return 1

    records = record_extractor.extract(entries, extract_all=args.extract_all)

    try:
        report_renderer.render(
            records, output=args.output, extract_all=args.extract_all
        )
    except OSError as err:
        logger.error(f"Failed writing report to '{args.output}': {err}")
        return 1

    logger.success(f"Reported {len(records)} entries from {args.vault}.")
    return 0


def run(argv: Sequence[str] | None = None) -> None:
    """Parse the command line, wire the container and run `main`."""
    args = parse_options("Report how each field of a vault export is encrypted.", argv)

    app_container = AppContainer()
    app_container.verbosity.override(args.verbose)

    try:
        app_container.config()
    except ValidationError as err:
        sys.exit(f"Invalid configuration: {err}")

    app_container.wire(modules=[__name__])

    try:
        status = main(args)
    finally:
        app_container.unwire()

    sys.exit(status)


if __name__ == "__main__":
    run()
