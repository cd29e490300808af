import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from verboselogs import VerboseLogger

from vault_parser.helpers import EnhancedJSONEncoder, dump_to_file, init_logger
from vault_parser.models import DecodedField, FieldEncoding


def test_encoder_writes_encodings_as_values():
    payload = [{"NameCM": FieldEncoding.CBC, "ExtraCM": "No Extra"}]

    assert json.loads(json.dumps(payload, cls=EnhancedJSONEncoder)) == [
        {"NameCM": "CBC", "ExtraCM": "No Extra"}
    ]


def test_encoder_rejects_other_objects():
    with pytest.raises(TypeError):
        json.dumps(DecodedField(iv_hex="AA", ct_hex="BB"), cls=EnhancedJSONEncoder)


def test_dump_to_file_creates_parent_dirs(tmp_path: Path):
    logger = MagicMock()
    target = tmp_path / "a" / "b" / "out.json"

    dump_to_file(logger, target, [{"URL": "é", "PasswordCM": FieldEncoding.ECB}])

    assert json.loads(target.read_text(encoding="utf-8")) == [
        {"URL": "é", "PasswordCM": "ECB"}
    ]
    logger.info.assert_called_once()


def test_dump_to_file_writes_strings_verbatim(tmp_path: Path):
    target = tmp_path / "out.html"

    dump_to_file(MagicMock(), target, "<html></html>")

    assert target.read_text(encoding="utf-8") == "<html></html>"


def test_init_logger_levels():
    assert isinstance(init_logger("quiet", 0), VerboseLogger)
    assert init_logger("verbose", 1).getEffectiveLevel() <= 15
    assert init_logger("spam", 10).getEffectiveLevel() <= 5
