"""Main entry point for the Dublin Bikes station API."""

import asyncio
import logging
import random
import sys

import uvicorn

from dublin_bikes.adapters.cache import TtlCache
from dublin_bikes.adapters.config import AppConfig
from dublin_bikes.adapters.dataset import JsonStationDatasetLoader
from dublin_bikes.adapters.memory import InMemoryStationRepository
from dublin_bikes.adapters.simulator import SimulatorSettings, StationUpdateSimulator
from dublin_bikes.adapters.web import create_app
from dublin_bikes.application.services import StationCatalogService
from dublin_bikes.domain.errors import DataError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    repository = InMemoryStationRepository()
    try:
        repository.load(JsonStationDatasetLoader(config.dataset_path).load())
    except DataError as e:
        logger.error(f"Could not load station dataset: {e}")
        sys.exit(1)

    cache = TtlCache()
    service = StationCatalogService(repository, cache, cache_ttl=config.cache_ttl)

    simulator = None
    if config.simulator_enabled:
        simulator = StationUpdateSimulator(
            repository,
            cache,
            SimulatorSettings(
                interval_seconds=config.simulator_interval_seconds,
                warmup_seconds=config.simulator_warmup_seconds,
            ),
            rng=random.Random(config.simulator_seed),
        )
    else:
        logger.info("Station update simulator disabled")

    app = create_app(service, config.zone, simulator=simulator)
    server = uvicorn.Server(
        uvicorn.Config(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    )
    await server.serve()


def cli_main() -> None:
    """Synchronous entry point for the server command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    cli_main()
