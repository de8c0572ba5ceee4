from .responses import ok, error, not_found, validation_error_response
from .validation import validate_schema, validate_query
from .latency import SimulatedLatency

__all__ = [
    'ok',
    'error',
    'not_found',
    'validation_error_response',
    'validate_schema',
    'validate_query',
    'SimulatedLatency',
]
