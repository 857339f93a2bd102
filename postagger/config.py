"""Configuration management for the tagging pipeline."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaggingConfig(BaseModel):
    """Configuration for fusion, pruning and decision."""

    model_config = ConfigDict(frozen=True)

    max_sentence_length: int = Field(default=990, ge=1)
    probability_prune_threshold: float = Field(
        default=0.001,
        ge=0.0,
        lt=1.0,
        description="Tags below this fraction of a token's total mass are pruned",
    )
    enable_secondary_source: bool = False
    bracket_style: Literal["pos", "ptb"] = Field(
        default="pos",
        description="'pos' maps -LRB- style escapes to brackets, 'ptb' the reverse",
    )
    unknown_tag: str = Field(default="unknown", min_length=1)


class ModelConfig(BaseModel):
    """Configuration for the scoring models."""

    model_config = ConfigDict(frozen=True)

    path: Optional[Path] = None
    secondary_path: Optional[Path] = None
    lowercase_fallback: bool = True


class OutputConfig(BaseModel):
    """Configuration for output options."""

    model_config = ConfigDict(frozen=True)

    output_file: Optional[Path] = None  # stdout when unset
    output_tag_probs: bool = False  # Emit pruned per-token distributions
    show_progress: bool = True


class Config(BaseModel):
    """Main configuration for the tagging pipeline."""

    model_config = ConfigDict(frozen=True)

    input_file: Optional[Path] = None  # stdin when unset
    tagging: TaggingConfig = Field(default_factory=TaggingConfig)
    model: ModelConfig = Field(default_factory=ModelConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path; '-' means stdin."""
        if v is None or v == "-":
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Config":
        """Create configuration from a (possibly empty) dictionary.

        Raises:
            ValueError: If data is not a mapping
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json", exclude_none=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def with_overrides(self, overrides: dict) -> "Config":
        """Return a new config with nested section overrides applied.

        Args:
            overrides: e.g. ``{"tagging": {"max_sentence_length": 100}}``
        """
        data = self.model_dump()
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key].update(value)
            else:
                data[key] = value
        return Config.from_dict(data)
