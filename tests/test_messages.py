"""Tests for pybig message catalogs."""

import json

from pybig.messages import LOCALE_DIR, MessageCatalog

KEYS = {
    "BAD_PATH",
    "BAD_SORT",
    "BAD_THRESHOLD",
    "BAD_LOCALE",
    "HELP",
    "NOTHING_ABOVE_THRESHOLD",
    "SCANNING",
}


class TestShippedCatalogs:
    """Test the catalogs bundled with the package."""

    def test_every_catalog_has_every_key(self):
        catalogs = sorted(LOCALE_DIR.glob("msgs-*.json"))
        assert catalogs
        for path in catalogs:
            assert set(json.loads(path.read_text(encoding="utf-8"))) == KEYS, path.name

    def test_every_catalog_has_help(self):
        for path in LOCALE_DIR.glob("msgs-*.json"):
            locale = path.stem[len("msgs-") :]
            assert (LOCALE_DIR / f"help-{locale}.txt").is_file()


class TestMessageCatalog:
    """Test MessageCatalog loading and lookup."""

    def test_load_default(self):
        catalog = MessageCatalog.load("en-US")
        assert catalog.locale == "en-US"
        assert "threshold" in catalog.get("NOTHING_ABOVE_THRESHOLD")

    def test_load_german(self):
        catalog = MessageCatalog.load("de-DE")
        assert catalog.locale == "de-DE"
        assert catalog.usage().startswith("Aufruf: pybig")

    def test_missing_catalog_falls_back(self):
        catalog = MessageCatalog.load("fr-FR")
        assert catalog.locale == "en-US"
        assert catalog.usage().startswith("Usage: pybig")

    def test_unknown_key(self):
        assert MessageCatalog.load("en-US").get("NOPE") == "NOPE"

    def test_missing_help_falls_back(self, tmp_path):
        (tmp_path / "msgs-en-US.json").write_text('{"HELP": "help"}', encoding="utf-8")
        (tmp_path / "help-en-US.txt").write_text("default usage", encoding="utf-8")
        (tmp_path / "msgs-it-IT.json").write_text('{"HELP": "aiuto"}', encoding="utf-8")
        catalog = MessageCatalog.load("it-IT", tmp_path)
        assert catalog.locale == "it-IT"
        assert catalog.get("HELP") == "aiuto"
        assert catalog.usage() == "default usage"

    def test_corrupt_catalog_falls_back(self, tmp_path):
        (tmp_path / "msgs-en-US.json").write_text('{"HELP": "help"}', encoding="utf-8")
        (tmp_path / "msgs-it-IT.json").write_text("{not json", encoding="utf-8")
        catalog = MessageCatalog.load("it-IT", tmp_path)
        assert catalog.locale == "en-US"
        assert catalog.get("HELP") == "help"

    def test_non_object_catalog_falls_back(self, tmp_path):
        (tmp_path / "msgs-en-US.json").write_text('{"HELP": "help"}', encoding="utf-8")
        (tmp_path / "msgs-it-IT.json").write_text("[]", encoding="utf-8")
        catalog = MessageCatalog.load("it-IT", tmp_path)
        assert catalog.locale == "en-US"
        assert catalog.get("HELP") == "help"
