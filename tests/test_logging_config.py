import logging
from pifan.config import AppConfig
from pifan.logging_config import LogSettings, ShortFormatter, resolve_log_settings

def clear_env(monkeypatch):
    for k in ("PIFAN_LOG_LEVEL", "PIFAN_LOGGING", "PIFAN_LOG_FILE"):
        monkeypatch.delenv(k, raising=False)

def test_short_formatter():
    rec = logging.LogRecord("pifan.runtime.FanService", logging.INFO, __file__, 1, "hi", None, None)
    assert ShortFormatter("%(shortname)s %(message)s").format(rec) == "FanService hi"

def test_env_beats_config(monkeypatch):
    monkeypatch.setenv("PIFAN_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("PIFAN_LOGGING", "0")
    monkeypatch.delenv("PIFAN_LOG_FILE", raising=False)
    cfg = AppConfig.model_validate({"logging": {"level": "ERROR", "file": "/tmp/x.log"}})
    assert resolve_log_settings(cfg, debug=True) == LogSettings(False, "WARNING", "/tmp/x.log")

def test_config_section_used(monkeypatch):
    clear_env(monkeypatch)
    cfg = AppConfig.model_validate({"logging": {"enabled": False, "level": "ERROR"}})
    assert resolve_log_settings(cfg) == LogSettings(False, "ERROR", None)

def test_debug_lowers_level(monkeypatch):
    clear_env(monkeypatch)
    assert resolve_log_settings(AppConfig(), debug=True) == LogSettings(True, "DEBUG", None)
    assert resolve_log_settings(AppConfig()) == LogSettings(True, "INFO", None)
