"""Dependency injection containers for the vault-parser application."""

from __future__ import annotations

from dependency_injector import containers, providers

from vault_parser.config import Settings
from vault_parser.helpers import init_logger
from vault_parser.parsing.vault_reader import VaultReader
from vault_parser.rendering.report_renderer import ReportRenderer
from vault_parser.services.record_extractor import RecordExtractor


class AppContainer(containers.DeclarativeContainer):
    """Main application container."""

    config = providers.Singleton(Settings)

    # Number of -v flags, overridden from the command line.
    verbosity = providers.Object(0)

    logger = providers.Singleton(
        init_logger,
        "vault_parser",
        verbosity,
        formatting=config.provided.log_format,
    )

    vault_reader = providers.Factory(VaultReader, logger=logger)

    record_extractor = providers.Factory(
        RecordExtractor,
        logger=logger,
        settings=config,
    )

    report_renderer = providers.Factory(
        ReportRenderer,
        logger=logger,
        settings=config,
    )
