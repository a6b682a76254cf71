from __future__ import annotations
import logging, os
from typing import Any, Optional
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pifan.errors import ConfigError

log = logging.getLogger(__name__)

DEFAULT_THERMAL = "/sys/class/thermal/thermal_zone0/temp"
SEARCH_PATHS = ("/etc/pifan/config.yaml", "config/config.yaml", "config.yaml")

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

class Pins(_Frozen): gpio: int = Field(default=2, ge=0)
class Control(_Frozen):
    start_c: int = 68; stop_c: int = 60
    interval_s: int = Field(default=5, gt=0); debug: bool = False
class Sensor(_Frozen): thermal: str = DEFAULT_THERMAL
class Logging(_Frozen): enabled: bool = True; level: str = "INFO"; file: Optional[str] = None
class AppConfig(_Frozen):
    pins: Pins = Field(default_factory=Pins); control: Control = Field(default_factory=Control)
    sensor: Sensor = Field(default_factory=Sensor); logging: Logging = Field(default_factory=Logging)

def _merge(base: dict, extra: dict) -> dict:
    out = dict(base)
    for k, v in extra.items():
        if isinstance(v, dict):
            out[k] = _merge(out.get(k) if isinstance(out.get(k), dict) else {}, v)
        elif v is not None:
            out[k] = v
    return out

def find_config(path: str | None = None) -> str | None:
    if path:
        if not os.path.exists(path):
            raise ConfigError(f"config file not found: {path}")
        return path
    for p in SEARCH_PATHS:
        if os.path.exists(p):
            return p
    return None

def load_config(path: str | None = None, overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Build the startup configuration: built-in defaults, then an optional YAML
    file, then ``overrides`` (CLI flags; ``None`` values are ignored).
    """
    data: dict = {}
    src = find_config(path)
    if src:
        try:
            with open(src, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot read {src}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{src}: top level must be a mapping")
    try:
        cfg = AppConfig.model_validate(_merge(data, overrides or {}))
    except ValidationError as e:
        raise ConfigError(str(e)) from e
    return cfg

def check_thresholds(cfg: AppConfig) -> None:
    if cfg.control.start_c <= cfg.control.stop_c:
        log.warning("start threshold %d°C is not above stop threshold %d°C; no hysteresis dead-band",
                    cfg.control.start_c, cfg.control.stop_c)
