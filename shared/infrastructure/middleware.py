import logging

from .http import CALLER_ID_HEADER

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Middleware для журналирования входящих запросов к API"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        logger.info(
            f"Endpoint request received: '{request.method} {request.get_full_path()}'. "
            f"Caller: '{request.headers.get(CALLER_ID_HEADER, '-')}'"
        )
        response = self.get_response(request)
        if response.status_code >= 400:
            logger.info(
                f"Request '{request.method} {request.path}' finished with status {response.status_code}"
            )
        return response
