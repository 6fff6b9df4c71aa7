"""Engine configuration."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError

DEFAULT_MAX_RESULTS = 5
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


class EngineConfig(BaseModel):
    """
    Tunable engine settings.

    Attributes:
        max_results: Number of results kept after ranking
        duplicate_policy: What to do when a document id is added twice
        max_file_size: Largest text file accepted for ingestion, in bytes
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_results: int = Field(DEFAULT_MAX_RESULTS, ge=1, le=1000, description="Results per query")
    duplicate_policy: Literal["replace", "reject"] = Field(
        "replace", description="Duplicate document id handling"
    )
    max_file_size: int = Field(DEFAULT_MAX_FILE_SIZE, gt=0, description="Max ingested file size")

    @classmethod
    def from_options(cls, **options: Any) -> "EngineConfig":
        """
        Build a config from keyword options.

        Raises:
            ConfigurationError: If any option is unknown or out of range
        """
        try:
            return cls(**options)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid engine configuration: {e}") from e
