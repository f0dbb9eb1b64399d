"""Live availability simulator."""

from dublin_bikes.adapters.simulator.station_update_simulator import (
    SimulatorSettings,
    StationUpdateSimulator,
)

__all__ = ["SimulatorSettings", "StationUpdateSimulator"]
