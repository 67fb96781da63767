import logging

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Log method, path and status of every API call."""
    PREFIXES = ('/api/',)

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path or ''
        response = self.get_response(request)
        if any(path.startswith(p) for p in self.PREFIXES):
            logger.info('%s %s -> %s', request.method, path, response.status_code)
        return response
