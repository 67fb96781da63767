import logging

from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class RecordNotFound(Exception):
    """No document with the requested internal or business id."""

    def __init__(self, label: str, lookup=None):
        self.label = label
        self.lookup = lookup
        super().__init__(f'{label} not found!')

    @property
    def message(self) -> str:
        return f'{self.label} not found!'


class PersistenceFailure(Exception):
    """A write was rejected by the store (schema validation or database error)."""

    def __init__(self, label: str, errors=None):
        self.label = label
        self.errors = errors or {}
        super().__init__(f'{label} could not be stored: {self.errors}')


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        # Unexpected failure: log it, never leak the detail
        logger.error('Unhandled error in %s', context.get('view'), exc_info=exc)
        return Response({'message': 'Internal server error!'}, status=500)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    return Response({'message': str(detail)}, status=resp.status_code)
