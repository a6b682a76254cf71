class PiFanError(Exception):
    """Base class for everything pifan raises on purpose."""

class SensorError(PiFanError):
    """Thermal source unreadable or not an integer millidegree value."""

class GPIOUnavailable(PiFanError):
    """The GPIO interface could not be acquired at startup."""

class ConfigError(PiFanError):
    pass
