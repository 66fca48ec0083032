"""
Response schemas.
"""

from modelerrors.schemas.response.base import BaseResponse
from modelerrors.schemas.response.error import ErrorInfo, ErrorResponse

__all__ = [
    "BaseResponse",
    "ErrorInfo",
    "ErrorResponse",
]
