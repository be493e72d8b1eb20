import os
from typing import List, Literal, Optional, Union

import yaml
import logging
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

CONFIG_PATH = os.getenv("CONFIG_PATH", "config/parser-config.yaml")


class LinesInput(BaseModel):
    """
    Configuration for literal input lines.
    This class lists the raw lines handed to the parser, in order.
    """
    type: Literal["lines"]
    lines: List[str] = Field(..., description="Raw lines to parse")

    def __init__(self, **data):
        logger.debug(f"Initializing LinesInput with data: {data}")
        super().__init__(**data)


class FileInput(BaseModel):
    """
    Configuration for file input settings.
    This class defines the path to read lines from ('-' for stdin) and its encoding.
    """
    type: Literal["file"]
    path: str = Field("-", description="File to read lines from, '-' for stdin")
    encoding: str = Field("utf-8", description="Text encoding of the input file")

    def __init__(self, **data):
        logger.debug(f"Initializing FileInput with data: {data}")
        super().__init__(**data)


InputConfig = Union[LinesInput, FileInput]


class ParserSettings(BaseModel):
    """
    Configuration for the parser settings.
    This class defines how lines are split, how records are serialized, and
    whether the first parse error stops the run.
    """
    parse_to: Literal["json"] = Field("json", description="Output serialization format")
    delimiter: str = Field(
        ",", min_length=1, description="Character to split incoming lines on"
    )
    fail_fast: bool = Field(
        True, description="Stop and propagate the first parse error"
    )

    def __init__(self, **data):
        logger.debug(f"Initializing ParserSettings with data: {data}")
        super().__init__(**data)


class ConsoleOutput(BaseModel):
    """
    Configuration for console output settings.
    This class defines the stream documents are written to and their JSON indent.
    """
    type: Literal["console"]
    stream: Literal["stdout", "stderr"] = Field("stdout", description="Stream to write to")
    indent: Optional[int] = Field(4, ge=0, description="JSON indent, null for one line")

    def __init__(self, **data):
        logger.debug(f"Initializing ConsoleOutput with data: {data}")
        super().__init__(**data)


OutputConfig = ConsoleOutput


class LoggingConfig(BaseModel):
    """
    Configuration for logging settings.
    This class defines the logging level for the application.
    """
    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field(
        "INFO", description="Logging level"
    )

    def __init__(self, **data):
        logger.debug(f"Initializing LoggingConfig with data: {data}")
        super().__init__(**data)


class MetricsConfig(BaseModel):
    """
    Configuration for the Prometheus metrics endpoint.
    """
    enabled: bool = Field(False, description="Expose metrics over HTTP")
    port: int = Field(8000, description="Port for the metrics HTTP server")

    @field_validator("port")
    @classmethod
    def check_port_range(cls, v):
        if not 0 < v < 65536:
            logger.error("Metrics port %s is out of range", v)
            raise ValueError("`port` must be between 1 and 65535")
        return v


class ClimateParserConfig(BaseModel):
    """
    Configuration for the parser application.
    This class encapsulates all necessary settings for input, parsing, output,
    logging and metrics.
    """
    input: InputConfig = Field(..., discriminator="type")
    parser: ParserSettings = Field(default_factory=ParserSettings)
    output: OutputConfig = Field(default_factory=lambda: ConsoleOutput(type="console"))
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    @classmethod
    def load(cls) -> "ClimateParserConfig":
        """
        Load and validate the parser configuration from YAML.
        Raises a clear exception if the file is missing or invalid.
        Returns:
            ClimateParserConfig: The validated configuration object.
        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ValueError: If the configuration is invalid.
        """
        logger.info(f"Loading configuration from {CONFIG_PATH}")
        try:
            with open(CONFIG_PATH, "r") as f:
                data = yaml.safe_load(f)
                logger.debug(f"Raw config data: {data}")
        except FileNotFoundError as e:
            logger.exception(f"Configuration file not found at {CONFIG_PATH}")
            raise FileNotFoundError(f"Configuration file not found at {CONFIG_PATH}") from e

        try:
            config = cls(**(data or {}))
            logger.info("Configuration loaded and validated successfully")
            logger.debug(f"Final config object: {config}")
            return config
        except Exception as e:
            logger.exception("Invalid configuration provided")
            raise ValueError(f"Invalid configuration: {e}") from e


def get_config() -> ClimateParserConfig:
    """
    Retrieve the parser configuration, loading it from the specified YAML file.
    Returns:
        ClimateParserConfig: The validated configuration object.
    """
    logger.info("Retrieving parser configuration")
    config = ClimateParserConfig.load()
    logger.debug(f"Parsed configuration object: {config}")
    return config
