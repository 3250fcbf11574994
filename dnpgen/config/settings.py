"""YAML configuration loading and validation."""

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import DnpGenError
from ..models import RuleSet

logger = logging.getLogger(__name__)


class ConfigError(DnpGenError):
    """Exception raised for missing or malformed configuration."""
    pass


CONFIG_FILE_NAME = "config.yaml"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"


class ClassificationConfig(BaseModel):
    """Output patterns per family."""
    model_config = ConfigDict(frozen=True)

    analog_output_regex: List[str] = Field(default_factory=list)
    digital_output_regex: List[str] = Field(default_factory=list)

    @field_validator("analog_output_regex", "digital_output_regex", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        # An empty YAML key loads as None
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class SparesConfig(BaseModel):
    """Spare placeholder text per category."""
    model_config = ConfigDict(frozen=True)

    do: str = "SPARE_DO"
    di: str = "SPARE_DI"
    ao: str = "SPARE_AO"
    ai: str = "SPARE_AI"
    annotate: bool = True       # Append "(<point>)" to mirrored spares


class AppConfig(BaseModel):
    """Settings under the top-level 'app' key."""
    model_config = ConfigDict(frozen=True)

    sigext_path: str = ""
    sigext_flags: str = ""
    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)
    spares: SparesConfig = Field(default_factory=SparesConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("sigext_path", "sigext_flags", mode="before")
    @classmethod
    def none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level


class DnpGenConfig(BaseModel):
    """Root of the configuration file."""
    model_config = ConfigDict(frozen=True)

    app: AppConfig = Field(default_factory=AppConfig)

    def build_rules(self, annotate: Optional[bool] = None) -> RuleSet:
        """
        Build the classification rule set.

        Args:
            annotate: Override of spares.annotate for this run

        Returns:
            RuleSet with compiled patterns
        """
        spares = self.app.spares
        classification = self.app.classification
        return RuleSet.from_patterns(
            analog_output_regex=classification.analog_output_regex,
            digital_output_regex=classification.digital_output_regex,
            spare_ai=spares.ai,
            spare_ao=spares.ao,
            spare_di=spares.di,
            spare_do=spares.do,
            annotate_spares=spares.annotate if annotate is None else annotate,
        )


def find_config_file(explicit_path: Optional[str] = None) -> Path:
    """
    Locate the configuration file.

    Lookup order: explicit path, config.yaml beside the running script,
    config.yaml in the working directory. The bundled default.yaml is a
    template only and is never picked up implicitly.

    Args:
        explicit_path: Path given on the command line

    Returns:
        Path to the configuration file

    Raises:
        ConfigError: If an explicit path does not exist or nothing is found
    """
    if explicit_path:
        path = Path(explicit_path)
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {explicit_path}")
        return path

    candidates = []
    if sys.argv and sys.argv[0]:
        candidates.append(Path(sys.argv[0]).resolve().parent / CONFIG_FILE_NAME)
    candidates.append(Path.cwd() / CONFIG_FILE_NAME)

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    searched = ", ".join(str(candidate) for candidate in candidates)
    raise ConfigError(
        f"No {CONFIG_FILE_NAME} found (searched: {searched}). "
        f"Pass --config or copy {DEFAULT_CONFIG_PATH} as a starting point."
    )


def parse_config(data: Any, source: str = "<config>") -> DnpGenConfig:
    """
    Validate already-loaded YAML data.

    Args:
        data: Result of yaml.safe_load
        source: Name used in error messages

    Returns:
        DnpGenConfig
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: top level must be a mapping")

    try:
        return DnpGenConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{source}: invalid configuration\n{e}") from e


def load_config(file_path: Optional[str] = None) -> DnpGenConfig:
    """
    Load and validate the configuration.

    Args:
        file_path: Explicit configuration file, or None to search

    Returns:
        DnpGenConfig

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    path = find_config_file(file_path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in {path}: {e}") from e

    config = parse_config(data, str(path))
    logger.debug(f"Configuration parsed from {path}")
    return config
