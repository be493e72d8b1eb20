"""
Author: Ziv P.H
Date: 2025-7-12
Description:
Prometheus metrics for the parser.

Defines counters and summaries for tracking line flow, parse errors by kind,
and parsing durations.
"""

from prometheus_client import Counter, Summary, start_http_server

LINES_IN = Counter(
    'climate_lines_in_total', 'Total number of lines received by the parser'
)
RECORDS_OUT = Counter(
    'climate_records_out_total', 'Total number of lines parsed into records'
)
PARSE_ERRORS = Counter(
    'climate_parse_errors_total', 'Total number of lines that failed to parse',
    ['kind'],
)

PARSE_DURATION = Summary(
    'climate_line_parse_duration_seconds', 'Time spent parsing individual lines'
)


def start_metrics_server(port: int = 8000) -> None:
    """Start the Prometheus metrics HTTP server."""
    start_http_server(port)
