"""Core shared kernel.

Result types, the base error dataclass, error codes, settings and the
human duration parser. Nothing here imports from the other layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
