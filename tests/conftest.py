from pathlib import Path

import pytest

from vault_parser.helpers import init_logger

from samples import VAULT_XML


@pytest.fixture
def logger():
    return init_logger("test", "INFO")


@pytest.fixture
def vault_file(tmp_path: Path) -> Path:
    path = tmp_path / "vault.xml"
    path.write_text(VAULT_XML, encoding="utf-8")
    return path
