"""
pifan - start / stop a cooling fan on a GPIO pin according to the
temperature reported by a thermal zone, with a hysteresis dead-band.
"""

__version__ = '1.0.0'
