"""Unit tests for application settings configuration."""

from pathlib import Path

from gateway.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_tenant_refs_always_enabled_in_development():
    settings = Settings(_env_file=None, app_env="development", enable_db_ref=False)
    assert settings.db_ref_enabled is True


def test_tenant_refs_need_flag_outside_development():
    assert Settings(_env_file=None, app_env="production").db_ref_enabled is False
    assert Settings(_env_file=None, app_env="production", enable_db_ref=True).db_ref_enabled is True


def test_page_limit_ceiling_defaults_to_twenty():
    settings = Settings(_env_file=None)
    assert settings.default_page_limit == 20
    assert settings.max_page_limit == 20
