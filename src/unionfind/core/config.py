"""Configuration management for unionfind."""

from pathlib import Path
import json

from pydantic import BaseModel, Field


class IslandsConfig(BaseModel):
    """Configuration for island counting."""

    land: str = Field(default=".", min_length=1, max_length=1, description="Land marker")


class MstConfig(BaseModel):
    """Column layout of weighted edge list files."""

    source_col: str = Field(default="source", description="First endpoint column")
    target_col: str = Field(default="target", description="Second endpoint column")
    weight_col: str = Field(default="weight", description="Edge weight column")


class ComponentsConfig(BaseModel):
    """Column layout of pair list files."""

    first_col: str = Field(default="element_1", description="First element column")
    second_col: str = Field(default="element_2", description="Second element column")
    weight_col: str | None = Field(default=None, description="Optional pair weight column")
    min_weight: float | None = Field(default=None, description="Minimum weight to link a pair")


class OutputConfig(BaseModel):
    """Configuration for console output."""

    verbose: bool = Field(default=False, description="Enable verbose logging")
    max_rows: int = Field(default=20, ge=1, description="Maximum table rows printed")


class Config(BaseModel):
    """Main configuration for unionfind tool."""

    islands: IslandsConfig = Field(default_factory=IslandsConfig)
    mst: MstConfig = Field(default_factory=MstConfig)
    components: ComponentsConfig = Field(default_factory=ComponentsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2, default=str)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, the default
            locations are tried before falling back to defaults.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "unionfind" / "config.json",
            Path.cwd() / "unionfind.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
