"""
Author: Ziv P.H
Date: 2025-7-12
Description:
Input handler classes for feeding raw lines to the parser.

Defines abstract and concrete handlers for reading lines from the
configuration itself or from a file (stdin when the path is '-').
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Union, Type, Optional, Callable, Iterator

from src.config import LinesInput, FileInput

logger = logging.getLogger(__name__)


class BaseInputHandler(ABC):
    """
    Abstract base class for input handlers.
    Defines the interface for reading lines and dispatching them.
    """

    def __init__(self, cfg, metrics_handler=None):
        """
        Initialize the input handler with configuration and optional metrics handler.

        Args:
            cfg: Configuration object for the input source.
            metrics_handler (Optional[object]): Optional metrics handler for tracking metrics.
        """
        self.cfg = cfg
        self.metrics = metrics_handler
        logger.debug("BaseInputHandler initialized with config: %s", cfg)

    @abstractmethod
    def lines(self) -> Iterator[str]:
        """
        Yield raw lines, without their trailing newline.
        """
        raise NotImplementedError

    def consume(self, on_line: Callable[[str], None]):
        """
        Read every line and dispatch it to the provided callback.

        Args:
            on_line (Callable[[str], None]): Callback function to process each line.
        """
        logger.debug("Starting line consumption")
        for line in self.lines():
            logger.debug("Processing line: %r", line)
            on_line(line)


class LinesInputHandler(BaseInputHandler):
    """
    Input handler for lines listed directly in the configuration.
    """

    def lines(self) -> Iterator[str]:
        yield from self.cfg.lines


def _strip_newline(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


class FileInputHandler(BaseInputHandler):
    """
    Input handler for a text file with one record per line.
    Only the line terminator is removed; whitespace inside the line is kept.
    """

    def lines(self) -> Iterator[str]:
        """
        Read the configured file, or stdin when the path is '-'.
        Raises:
            FileNotFoundError: If the file does not exist.
        """
        if self.cfg.path == "-":
            logger.debug("Reading lines from stdin")
            for line in sys.stdin:
                yield _strip_newline(line)
            return

        logger.debug("Reading lines from %s", self.cfg.path)
        try:
            with open(self.cfg.path, "r", encoding=self.cfg.encoding, newline="") as f:
                for line in f:
                    yield _strip_newline(line)
        except FileNotFoundError:
            logger.error("Input file not found: %s", self.cfg.path)
            raise


_input_handlers_map: dict[Type, Type] = {
    LinesInput: LinesInputHandler,
    FileInput: FileInputHandler,
}


def get_input_handler(
    input_cfg: Union[LinesInput, FileInput],
    metrics_handler: Optional[object] = None
) -> BaseInputHandler:
    """
    Factory function to get the appropriate input handler based on the configuration type.

    Args:
        input_cfg (Union[LinesInput, FileInput]): The input configuration object.
        metrics_handler (Optional[object]): Optional metrics handler for tracking metrics.

    Returns:
        BaseInputHandler: The appropriate input handler instance.

    Raises:
        ValueError: If the input type is unsupported.
    """
    logger.debug("Getting input handler for configuration: %s", type(input_cfg).__name__)
    handler_cls = _input_handlers_map.get(type(input_cfg))
    if not handler_cls:
        logger.error("Unsupported input type: %s", type(input_cfg).__name__)
        raise ValueError(f"Unsupported input type: {type(input_cfg)}")
    logger.info("Input handler %s selected", handler_cls.__name__)
    return handler_cls(input_cfg, metrics_handler)
