"""Infrastructure layer exceptions."""

from pathlib import Path

from ridingtally.domain.exceptions import RidingTallyError


class DataSourceError(RidingTallyError):
    """Election data could not be read."""


class DataDirectoryNotFoundError(DataSourceError):
    """The directory holding an election's result files does not exist."""

    def __init__(self, directory: Path):
        super().__init__(
            f"Data directory not found: {directory}", {"directory": str(directory)}
        )
        self.directory = directory
