"""
Author: Ziv P.H
Date: 2025-7-12
Description:
Main entry point for the climate record parser.

Handles configuration loading, logging setup, metrics server startup, and parser execution.
"""

import logging
import sys

from src.config import get_config
from src.exceptions import ParseClimateError
from src.parsers import get_parser
from src.metrics import start_metrics_server


def setup_logging(level: str):
    root = logging.getLogger()
    # Remove default handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    # Console handler
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)-5s %(name)s: %(message)s"))
    root.addHandler(ch)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def main() -> int:
    cfg = get_config()

    setup_logging(cfg.logging.level)
    logging.info("Starting climate record parser")

    if cfg.metrics.enabled:
        start_metrics_server(cfg.metrics.port)

    parser = get_parser(cfg)
    try:
        parser.run()
    except ParseClimateError:
        logging.exception("Fatal parse error")
        return 1
    except KeyboardInterrupt:
        logging.info("Parser interrupted by user, shutting down")
    finally:
        parser.output_handler.close()

    logging.info("Finished with %d parse error(s)", parser.errors)
    return 0


if __name__ == '__main__':
    sys.exit(main())
