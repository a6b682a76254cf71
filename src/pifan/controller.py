import logging, threading
from pifan.config import Control
from pifan.sensors import TemperatureSensor
from pifan.gpioio import FanPin
from pifan import telemetry

class FanController:
    """
    On/off fan control with a hysteresis dead-band between stop_c and start_c.
    Holds no fan state of its own; the pin is read back before switching off.
    """
    def __init__(self, sensor: TemperatureSensor, fan: FanPin, control: Control, logger=None):
        self.sensor=sensor; self.fan=fan; self.cfg=control
        self.log=logger or logging.getLogger(__name__)

    def tick(self) -> int:
        t=self.sensor.read_c()
        if self.cfg.debug:
            telemetry.log_memory_usage(self.log)
            telemetry.log_iteration(self.log, t, self.fan.read_state())
        if t>=self.cfg.start_c:
            if not self.fan.is_on: self.log.info("Fan ON at %d°C", t)
            self.fan.on()
        elif t<=self.cfg.stop_c:
            if self.fan.read_state()==1:
                self.log.info("Fan OFF at %d°C", t); self.fan.off()
        return t

    def run(self, stop: threading.Event) -> None:
        while not stop.is_set():
            self.tick()
            stop.wait(self.cfg.interval_s)
