"""Protocol for the live availability simulator."""

from typing import Protocol


class StationSimulatorProtocol(Protocol):
    """Protocol for a background task that keeps station availability moving."""

    async def start(self) -> None:
        """Start the simulator."""
        ...

    async def stop(self) -> None:
        """Stop the simulator."""
        ...
