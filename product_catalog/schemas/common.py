"""
==============================================================================
Common Schemas Module
==============================================================================

Error envelope shared by all API endpoints.

==============================================================================
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    """Machine and human readable error description."""
    code: str
    message: str
    timestamp: str
    details: Optional[Dict[str, Any]] = Field(default=None)


class ErrorResponse(BaseModel):
    """Standard error response wrapper."""
    success: bool = Field(default=False)
    error: ErrorBody
