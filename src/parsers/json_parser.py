import json
import logging
from typing import Optional

from src.config import ClimateParserConfig
from src.exceptions import ParseClimateError
from src.input_handler import get_input_handler
from src.models import Climate
from src.record_parser import ClimateRecordParser
from src.output_handler import get_output_handler
from src.metrics import (
    LINES_IN,
    RECORDS_OUT,
    PARSE_ERRORS,
    PARSE_DURATION,
)

logger = logging.getLogger(__name__)


class ClimateJSONParser:
    """
    Parser that reads raw lines, turns them into Climate records, and publishes them as JSON.
    """

    def __init__(self, cfg: ClimateParserConfig):
        """
        Initialize the ClimateJSONParser with the provided configuration.

        Args:
            cfg (ClimateParserConfig): The configuration object containing input, output, and parsing settings.
        """
        self.cfg = cfg
        self.record_parser = ClimateRecordParser(cfg.parser)
        self.input_handler = get_input_handler(cfg.input)
        self.output_handler = get_output_handler(cfg.output)
        self.errors = 0

    def _error_document(self, line: str, err: ParseClimateError) -> str:
        cause = err.cause
        return json.dumps(
            {
                "input": line,
                "error": str(err),
                "kind": err.kind.value,
                "cause": None if cause is None else str(cause),
            },
            indent=self.cfg.output.indent,
        )

    def handle_line(self, line: str) -> Optional[Climate]:
        """
        Parse a raw line into a Climate record, convert it to JSON, and publish it.

        Args:
            line (str): The raw line to be processed.

        Returns:
            Optional[Climate]: The record, or None if the line failed and fail_fast is off.

        Raises:
            ParseClimateError: If the line fails to parse and fail_fast is on.
        """
        LINES_IN.inc()
        try:
            with PARSE_DURATION.time():
                record = self.record_parser.parse(line)
        except ParseClimateError as e:
            self.errors += 1
            PARSE_ERRORS.labels(kind=e.kind.value).inc()
            logger.error("Failed to parse line %r: %s", line, e)
            self.output_handler.publish(self._error_document(line, e))
            if self.cfg.parser.fail_fast:
                raise
            return None

        json_data = record.to_json(indent=self.cfg.output.indent)
        logger.debug("Parsed line: %s", json_data)
        self.output_handler.publish(json_data)
        RECORDS_OUT.inc()
        return record

    def run(self):
        """
        Parse and publish every line the input handler yields.
        """
        self.input_handler.consume(self.handle_line)
