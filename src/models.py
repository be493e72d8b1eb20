"""
Author: Ziv P.H
Date: 2025-7-19
Description:
The structured record produced by a successful parse.
"""

import json
import math

from pydantic import BaseModel, ConfigDict, Field

YEAR_MAX = (1 << 32) - 1


class Climate(BaseModel):
    """
    One climate observation: a city, a year and a temperature.
    Instances are immutable; an empty city is rejected at construction.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    city: str = Field(..., min_length=1, description="City name")
    year: int = Field(..., ge=0, le=YEAR_MAX, description="Observation year")
    temperature: float = Field(..., description="Temperature reading")

    def to_json(self, indent=None) -> str:
        """
        Render the record as a JSON object with sorted keys.
        Non-finite temperatures are written as the strings "inf", "-inf" and "nan".
        """
        data = self.model_dump()
        if not math.isfinite(self.temperature):
            data["temperature"] = str(self.temperature)
        return json.dumps(data, indent=indent, sort_keys=True, allow_nan=False)
