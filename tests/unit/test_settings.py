from membership_engine.app.factory import create_classification_service, create_section_catalog
from membership_engine.adapters.catalog.file_section_catalog import FileSectionCatalog
from membership_engine.adapters.catalog.in_memory_section_catalog import InMemorySectionCatalog
from membership_engine.settings import Settings


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FALLBACK_DURATION_DAYS", "14")
    monkeypatch.setenv("SECTION_CATALOG_PATH", "/etc/gym/sections.json")
    settings = Settings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.fallback_duration_days == 14
    assert settings.section_catalog_path == "/etc/gym/sections.json"


def test_settings_defaults(monkeypatch):
    for var in ("LOG_LEVEL", "FALLBACK_DURATION_DAYS", "SECTION_CATALOG_PATH"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings.from_env()
    assert settings.log_level == "INFO"
    assert settings.fallback_duration_days == 30
    assert settings.section_catalog_path is None


def test_factory_picks_catalog_adapter():
    assert isinstance(create_section_catalog(Settings()), InMemorySectionCatalog)
    assert isinstance(create_section_catalog(Settings(section_catalog_path="sections.json")), FileSectionCatalog)
    assert isinstance(create_section_catalog(Settings(), catalog_path="override.json"), FileSectionCatalog)


def test_factory_passes_fallback_days_to_config():
    service = create_classification_service(Settings(fallback_duration_days=7))
    assert service.config.fallback_duration_days == 7
    assert service.config.session_pack_fallback_days == 7
