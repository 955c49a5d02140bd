# Test repair settings and environment resolution
import pytest
from pydantic import ValidationError

from unicode_cell import UnicodeCell, concat
from unicode_cell import settings as settings_module
from unicode_cell.settings import RepairSettings, load_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    monkeypatch.delenv(settings_module.LOG_REPAIRS_ENV_VAR, raising=False)
    settings_module._cached_settings = None
    yield
    settings_module._cached_settings = None


class TestRepairSettings:
    def test_defaults(self):
        settings = RepairSettings()
        assert settings.replacement == 0xFFFD
        assert settings.log_repairs is True

    def test_replacement_must_be_scalar(self):
        with pytest.raises(ValidationError):
            RepairSettings(replacement=0xD800)

    def test_replacement_must_fit_one_unit(self):
        """A replacement above 0xFFFF would take two units per unpaired unit."""
        with pytest.raises(ValidationError):
            RepairSettings(replacement=0x1F4A9)

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            RepairSettings(strict=True)


class TestLoadSettings:
    def test_defaults_without_env(self):
        assert load_settings() == RepairSettings()

    def test_cached(self):
        assert load_settings() is load_settings()

    def test_log_repairs_from_env(self, monkeypatch):
        monkeypatch.setenv(settings_module.LOG_REPAIRS_ENV_VAR, "off")
        assert load_settings(refresh=True).log_repairs is False
        monkeypatch.setenv(settings_module.LOG_REPAIRS_ENV_VAR, "1")
        assert load_settings(refresh=True).log_repairs is True

    def test_environment_cannot_change_replacement(self, monkeypatch):
        """Default repair always emits U+FFFD whatever the environment holds."""
        monkeypatch.setenv("UNICODE_CELL_REPLACEMENT", "1F4A9")
        assert load_settings(refresh=True).replacement == 0xFFFD

        lone = UnicodeCell.from_code_units([0xD83D])
        assert lone.to_scalar_repaired().to_scalars() == [0xFFFD]

        bar = UnicodeCell.from_text("|")
        assert concat(concat(bar, lone), bar).utf16_length() == 3


if __name__ == "__main__":
    pytest.main([__file__])
