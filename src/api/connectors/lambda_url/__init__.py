"""Adapter de AWS Lambda Function URL."""

from api.connectors.lambda_url.event import (
    InvalidEventError,
    build_function_url_response,
    parse_function_url_event,
    request_id_from_event,
)

__all__ = [
    "InvalidEventError",
    "build_function_url_response",
    "parse_function_url_event",
    "request_id_from_event",
]
