from __future__ import annotations
import argparse, logging, os, sys
from pifan import telemetry
from pifan.config import DEFAULT_THERMAL, check_thresholds, find_config, load_config
from pifan.errors import ConfigError, GPIOUnavailable
from pifan.logging_config import resolve_log_settings, setup_logging
from pifan.runtime import build_runtime

log = logging.getLogger("pifan")

EPILOG = f"""\
Example:

  %(prog)s -start 68 -stop 60 -timeout 5 -thermal {DEFAULT_THERMAL} -gpio 2

Set MODE=debug to log memory usage, temperature and pin state every poll.
"""

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pifan", description="Start / stop a fan according to temperature thresholds.",
                                epilog=EPILOG, formatter_class=argparse.RawDescriptionHelpFormatter, allow_abbrev=False)
    p.add_argument('-start', '--start', type=int, metavar='C', help='Temperature threshold (start), default 68')
    p.add_argument('-stop', '--stop', type=int, metavar='C', help='Temperature threshold (stop), default 60')
    p.add_argument('-timeout', '--timeout', type=int, metavar='S', help='Timeout in seconds, default 5')
    p.add_argument('-thermal', '--thermal', metavar='PATH', help='Thermal information source')
    p.add_argument('-gpio', '--gpio', type=int, metavar='PIN', help='GPIO pin (BCM), default 2')
    p.add_argument('-config', '--config', metavar='FILE', help='YAML configuration file')
    return p

def debug_from_env() -> bool:
    return os.getenv("MODE", "") == "debug"

def overrides_from_args(a: argparse.Namespace, debug: bool = False) -> dict:
    o = {"control": {"start_c": a.start, "stop_c": a.stop, "interval_s": a.timeout},
         "sensor": {"thermal": a.thermal}, "pins": {"gpio": a.gpio}}
    if debug: o["control"]["debug"] = True
    return o

def main(argv: list[str] | None = None) -> int:
    a = build_parser().parse_args(argv)
    debug = debug_from_env()
    try:
        src = find_config(a.config)
        cfg = load_config(src, overrides_from_args(a, debug))
    except ConfigError as e:
        setup_logging()
        log.error("Invalid configuration: %s", e)
        return 1
    setup_logging(*resolve_log_settings(cfg, debug=cfg.control.debug))
    if src:
        log.info("Loaded configuration from %s", src)
    check_thresholds(cfg)
    if cfg.control.debug:
        telemetry.start_tracing()

    try:
        service = build_runtime(cfg)
    except GPIOUnavailable as e:
        log.error("%s", e)
        return 1
    service.install_signal_handlers()
    log.info("PiFan fan monitor: running. (gpio=%d start=%d°C stop=%d°C every %ds)",
             cfg.pins.gpio, cfg.control.start_c, cfg.control.stop_c, cfg.control.interval_s)
    service.start()
    return service.wait()

if __name__ == "__main__":
    sys.exit(main())
