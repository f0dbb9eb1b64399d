"""Background simulator that keeps station availability moving."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dublin_bikes.domain.contracts.station_simulator import StationSimulatorProtocol
from dublin_bikes.domain.errors import TransientError

if TYPE_CHECKING:
    from dublin_bikes.domain.contracts.cache import CacheProtocol
    from dublin_bikes.domain.models import Station
    from dublin_bikes.domain.ports import StationRepository

logger = logging.getLogger(__name__)

MIN_CAPACITY = 10
CAPACITY_JITTER = 5


@dataclass(frozen=True)
class SimulatorSettings:
    """Timing settings for the simulator."""

    interval_seconds: float = 15.0
    warmup_seconds: float = 5.0


class StationUpdateSimulator(StationSimulatorProtocol):
    """Periodically rewrites availability on every station to mimic a live feed."""

    def __init__(
        self,
        station_repository: StationRepository,
        cache: CacheProtocol,
        settings: SimulatorSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the simulator.

        Args:
            station_repository: Repository whose stations are updated.
            cache: Cache cleared once after every pass.
            settings: Interval and warm-up delay.
            rng: Random source; pass a seeded instance for repeatable passes.
        """
        self.station_repository = station_repository
        self.cache = cache
        self.settings = settings or SimulatorSettings()
        self.rng = rng or random.Random()
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        """Whether the background task is active."""
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the simulator."""
        if self.is_running:
            logger.warning("Station update simulator already running")
            return

        logger.info(
            f"Station update simulator is starting "
            f"(first pass in {self.settings.warmup_seconds}s, "
            f"then every {self.settings.interval_seconds}s)"
        )
        self._task = asyncio.create_task(self._update_loop())

    async def stop(self) -> None:
        """Stop the simulator."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Station update simulator cancelled")
            logger.info("Station update simulator is stopping")
        self._task = None

    def _simulate_station(self, station: Station) -> tuple[int, int]:
        """Draw new (available bikes, available stands) for one station."""
        capacity = max(
            MIN_CAPACITY,
            station.bike_stands + self.rng.randint(-CAPACITY_JITTER, CAPACITY_JITTER),
        )
        available_bikes = self.rng.randint(0, capacity)
        return available_bikes, capacity - available_bikes

    def run_pass(self) -> int:
        """Update every station once, then clear the cache.

        Returns:
            Number of stations updated.

        Raises:
            TransientError: If the pass could not be completed.
        """
        try:
            stations = self.station_repository.list_all()
            for station in stations:
                available_bikes, available_stands = self._simulate_station(station)
                self.station_repository.set_availability(
                    station.number, available_bikes, available_stands
                )
        except Exception as e:
            raise TransientError(f"Station update pass failed: {e}") from e
        finally:
            # A partial pass may already have changed some stations.
            self.cache.clear()

        logger.info(f"Updated {len(stations)} stations")
        return len(stations)

    def _run_pass_with_error_handling(self) -> None:
        """Run one pass, logging failures so the loop keeps going."""
        try:
            self.run_pass()
        except TransientError as e:
            logger.error(f"Error occurred while updating stations (will retry): {e}", exc_info=True)

    async def _update_loop(self) -> None:
        """Main simulation loop."""
        try:
            await asyncio.sleep(self.settings.warmup_seconds)
            while True:
                self._run_pass_with_error_handling()
                await asyncio.sleep(self.settings.interval_seconds)
        except asyncio.CancelledError:
            logger.info("Station update simulator cancelled")
            raise
