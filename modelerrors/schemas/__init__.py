"""
Response schemas for rendering errors over HTTP.
"""

from modelerrors.schemas.metadata import BaseMetadata, ResponseMetadata
from modelerrors.schemas.response import BaseResponse, ErrorInfo, ErrorResponse

__all__ = [
    # Metadata schemas
    "BaseMetadata",
    "ResponseMetadata",
    # Response schemas
    "BaseResponse",
    "ErrorResponse",
    "ErrorInfo",
]
