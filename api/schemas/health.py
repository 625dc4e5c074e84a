# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: health.py
# -----------------------------------------------------------------------------
from typing import Dict, List

from pydantic import BaseModel, Field

class HealthResponse(BaseModel):
    status: str
    message: str

class ReadinessResponse(BaseModel):
    ready: bool
    indexed_products: int
    failed_products: List[int] = Field(default_factory=list)

class SmokeTestSummary(BaseModel):
    total: int
    passed: int
    failed: int

class DeepHealthResponse(BaseModel):
    status: str
    results: Dict[str, bool]
    summary: SmokeTestSummary
