"""dateserial Data Models."""

from .encoding_request import EncodingRequest

__all__ = [
    'EncodingRequest',
]
