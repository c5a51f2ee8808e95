"""Finder configuration."""

from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field

from .app import app_dirs
from .pydantic import JavaHome


class FinderConfig(BaseModel):
    """Settings for locating the Java home."""

    env_var: str = Field(default=JavaHome.ENV_VAR, description="Environment variable holding the Java home.")
    java_executable: str = Field(default="java", description="Executable queried for its java.home property.")
    java_args: list[str] = Field(
        default_factory=lambda: ["-XshowSettings:properties", "-version"],
        description="Arguments that make the executable print its properties.",
    )
    property_name: str = Field(default="java.home", description="Property reporting the home directory.")

    @property
    def command(self) -> list[str]:
        """Full command line of the java query."""
        return [self.java_executable, *self.java_args]


def load_config(path: Path | None = None) -> FinderConfig:
    """Load the config from a JSON file, falling back to defaults when it does not exist."""
    if path is None:
        path = app_dirs.app_config_path
    if not path.exists():
        logger.debug("no config at {}, using defaults", path)
        return FinderConfig()
    logger.debug("loading config from {}", path)
    return FinderConfig.model_validate_json(path.read_text())
