"""
Settings unit tests
"""

from zosmf_sdk.config.settings import get_settings, reload_settings


def test_settings_defaults():
    settings = reload_settings()

    assert settings.zosmf_host == ""
    assert settings.zosmf_port == 443
    assert settings.zosmf_verify_ssl is True
    assert settings.zosmf_timeout == 30.0
    assert settings.job_monitor_attempts == 1000
    assert settings.job_monitor_watch_delay_ms == 3000
    assert settings.job_monitor_line_limit == 1000
    assert settings.log_level == "WARNING"


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("ZOSMF_HOST", "mvs.example.com")
    monkeypatch.setenv("ZOSMF_PORT", "10443")
    monkeypatch.setenv("ZOSMF_VERIFY_SSL", "false")
    monkeypatch.setenv("ZOSMF_TIMEOUT", "12.5")
    monkeypatch.setenv("JOB_MONITOR_ATTEMPTS", "20")
    monkeypatch.setenv("JOB_MONITOR_WATCH_DELAY_MS", "500")
    monkeypatch.setenv("JOB_MONITOR_LINE_LIMIT", "50")
    monkeypatch.setenv("LOG_LEVEL", "info")

    settings = reload_settings()

    assert settings.zosmf_host == "mvs.example.com"
    assert settings.zosmf_port == 10443
    assert settings.zosmf_verify_ssl is False
    assert settings.zosmf_timeout == 12.5
    assert settings.job_monitor_attempts == 20
    assert settings.job_monitor_watch_delay_ms == 500
    assert settings.job_monitor_line_limit == 50
    assert settings.log_level == "info"


def test_settings_cache(monkeypatch):
    monkeypatch.setenv("ZOSMF_HOST", "cache-test")
    settings = reload_settings()
    assert settings.zosmf_host == "cache-test"

    monkeypatch.setenv("ZOSMF_HOST", "cache-updated")
    assert get_settings().zosmf_host == "cache-test"


def test_settings_module_loads_dotenv():
    import zosmf_sdk.config.settings as settings_mod

    assert hasattr(settings_mod, "_dotenv_path")
    assert isinstance(settings_mod._dotenv_path, str)
