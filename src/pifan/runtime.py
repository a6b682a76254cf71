from __future__ import annotations
import logging, signal, threading
from typing import Callable, Optional
from pifan.config import AppConfig
from pifan.controller import FanController
from pifan.errors import GPIOUnavailable, SensorError
from pifan.gpioio import FanPin, close_gpio, open_gpio
from pifan.sensors import ThermalZoneSensor

SHUTDOWN_SIGNALS = (signal.SIGHUP, signal.SIGINT, signal.SIGTERM, signal.SIGQUIT)

class FanService:
    """
    Runs FanController.run() in a worker thread and owns the shutdown path:
    a stop request ends the loop, then the fan is forced off and the GPIO
    resource released before wait() returns.
    """
    def __init__(self, ctrl: FanController, fan: FanPin, release: Callable[[], None]):
        self.ctrl = ctrl
        self.fan = fan
        self._release = release
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._closed = False
        self.error: Optional[BaseException] = None
        self._log = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def stopping(self) -> bool:
        return self._stop.is_set()

    def _worker(self) -> None:
        try:
            self.ctrl.run(self._stop)
        except Exception as e:
            self.error = e

    def start(self) -> None:
        self._thread = threading.Thread(target=self._worker, name="fan-control", daemon=True)
        self._thread.start()

    def request_stop(self, signum: int | None = None, frame=None) -> None:
        if signum is not None:
            self._log.info("Caught signal: %s", signal.Signals(signum).name)
        self._log.info("Stopping PiFan fan monitor...")
        self._stop.set()

    def install_signal_handlers(self) -> None:
        for sig in SHUTDOWN_SIGNALS:
            signal.signal(sig, self.request_stop)

    def shutdown(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self.fan.off()
        finally:
            self._release()
        self._log.info("PiFan fan monitor: stopped.")

    def wait(self) -> int:
        # join in slices so signal handlers get to run on the main thread
        while self._thread is not None and self._thread.is_alive():
            self._thread.join(0.5)
        if isinstance(self.error, SensorError):
            self._log.critical("Temperature read failed: %s", self.error)
            if self.stopping:
                self.shutdown()
            return 1
        if self.error is not None:
            self._log.error("Fan control loop died", exc_info=self.error)
            self.shutdown()
            return 1
        self.shutdown()
        return 0

def build_runtime(cfg: AppConfig, gpio=None) -> FanService:
    """Acquire GPIO (unless given) and wire sensor, pin, controller and service."""
    gpio = gpio if gpio is not None else open_gpio()
    try:
        fan = FanPin(cfg.pins.gpio, gpio)
    except RuntimeError as e:
        # RPi.GPIO maps /dev/gpiomem on the first setup()
        raise GPIOUnavailable(f"cannot set up GPIO{cfg.pins.gpio}: {e}") from e
    sensor = ThermalZoneSensor(cfg.sensor.thermal)
    ctrl = FanController(sensor, fan, cfg.control)
    return FanService(ctrl, fan, lambda: close_gpio(gpio, cfg.pins.gpio))
