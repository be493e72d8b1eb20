import logging
import sys
from abc import ABC, abstractmethod
from typing import Type, Dict, Union, Optional, TextIO

from src.config import ConsoleOutput

logger = logging.getLogger(__name__)


class BaseOutputHandler(ABC):
    """
    Abstract base class for output handlers.
    Defines the interface for connecting, publishing, and closing output targets.
    """

    def __init__(self, cfg, metrics_handler: Optional[object] = None):
        """
        Initialize the output handler with configuration and optional metrics handler.

        Args:
            cfg: Configuration object for the output target.
            metrics_handler (Optional[object]): Optional metrics handler for tracking metrics.
        """
        self.cfg = cfg
        self.metrics = metrics_handler
        self.stream: Optional[TextIO] = None
        logger.debug("OutputHandler initialized with config: %s", cfg)

    @abstractmethod
    def connect(self):
        """
        Open the output target.
        Should be idempotent and implemented by subclasses.
        """
        raise NotImplementedError

    @abstractmethod
    def publish(self, body: str) -> None:
        """
        Publish one document to the output target.

        Args:
            body (str): The serialized document.
        """
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """
        Flush and release the output target.
        Should be implemented by subclasses.
        """
        raise NotImplementedError


class ConsoleOutputHandler(BaseOutputHandler):
    """
    Output handler for the console.
    Writes each document to stdout or stderr, followed by a newline.
    """

    def connect(self) -> TextIO:
        """
        Resolve the configured stream.
        Returns the stream if already resolved.

        Returns:
            TextIO: sys.stdout or sys.stderr.
        """
        if self.stream is not None:
            return self.stream
        self.stream = sys.stderr if self.cfg.stream == "stderr" else sys.stdout
        logger.debug("Console output bound to %s", self.cfg.stream)
        return self.stream

    def publish(self, body: str):
        """
        Write a document to the console.

        Args:
            body (str): The serialized document.
        """
        stream = self.connect()
        stream.write(body + "\n")

    def close(self):
        """
        Flush the console stream.
        Logs any errors encountered while flushing.
        """
        if self.stream is None:
            return
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            logger.warning("Error flushing console output: %s", e, exc_info=True)
        self.stream = None


_output_handlers_map: Dict[Type, Type[BaseOutputHandler]] = {
    ConsoleOutput: ConsoleOutputHandler,
}


def get_output_handler(
        output_cfg: Union[ConsoleOutput],
        metrics_handler: Optional[object] = None
) -> BaseOutputHandler:
    """
    Factory function to get the appropriate output handler based on the configuration type.

    Args:
        output_cfg (Union[ConsoleOutput]): The output configuration object.
        metrics_handler (Optional[object]): Optional metrics handler for tracking metrics.

    Returns:
        BaseOutputHandler: The appropriate output handler instance.

    Raises:
        ValueError: If the output type is unsupported.
    """
    logger.debug("Getting output handler for configuration: %s", type(output_cfg).__name__)
    handler_cls = _output_handlers_map.get(type(output_cfg))
    if not handler_cls:
        logger.error("Unsupported output type: %s", type(output_cfg).__name__)
        raise ValueError(f"Unsupported output type: {type(output_cfg)}")
    logger.info("Output handler %s selected", handler_cls.__name__)
    return handler_cls(output_cfg, metrics_handler)
