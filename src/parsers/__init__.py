from src.config import ClimateParserConfig
from .json_parser import ClimateJSONParser


def get_parser(cfg: ClimateParserConfig):
    """
    Factory to return the correct parser instance based on cfg.parser.parse_to.
    """
    parse_type = cfg.parser.parse_to.lower()
    if parse_type == "json":
        return ClimateJSONParser(cfg)
    else:
        raise ValueError(f"Unsupported parser type: {cfg.parser.parse_to}")
