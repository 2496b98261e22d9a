# Models package
from .device import Device
from .temperature_reading import TemperatureReading

__all__ = ['Device', 'TemperatureReading']
