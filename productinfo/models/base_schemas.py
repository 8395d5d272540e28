"""
Base schemas for the product info API.
"""
from typing import Dict, Optional

from pydantic import BaseModel

from productinfo.models.enums import ErrorSource


class ProviderError(BaseModel):
    """Error response from a provider."""
    provider: str
    message: str
    details: Optional[Dict] = None


class ErrorResponse(BaseModel):
    """API error response."""
    error: str
    source: ErrorSource
    details: Optional[Dict] = None
