import logging
from pifan.errors import GPIOUnavailable

log = logging.getLogger(__name__)

def open_gpio():
    """
    Import and initialise RPi.GPIO (BCM numbering, warnings off).
    The import is deferred so the package loads on hosts without GPIO; any
    failure here is reported as GPIOUnavailable.
    """
    try:
        import RPi.GPIO as GPIO
        GPIO.setmode(GPIO.BCM); GPIO.setwarnings(False)
    except (ImportError, RuntimeError) as e:
        raise GPIOUnavailable(f"cannot open GPIO: {e}") from e
    return GPIO

def close_gpio(gpio, pin: int) -> None:
    gpio.cleanup(pin)

class FanPin:
    """Fan switch on one output pin. State always comes from the pin itself."""
    def __init__(self, pin: int, gpio):
        self.pin = pin; self.gpio = gpio
        gpio.setup(self.pin, gpio.OUT)
    def on(self): self.gpio.output(self.pin, self.gpio.HIGH)
    def off(self): self.gpio.output(self.pin, self.gpio.LOW)
    def read_state(self) -> int:
        return 1 if self.gpio.input(self.pin) else 0
    @property
    def is_on(self) -> bool: return self.read_state() == 1
