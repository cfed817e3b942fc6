from __future__ import annotations

import re

from django.utils.deprecation import MiddlewareMixin

from hospital_core.common.api.exceptions import ensure_request_id


class RequestIdMiddleware(MiddlewareMixin):
    """
    Tags every request with a request id and echoes it back in X-Request-Id.

    Behavior:
      - A well-formed incoming X-Request-Id (from a proxy / the dashboards) is reused.
      - Otherwise a fresh uuid4 hex is generated.
      - The same id is what error envelopes report, so a client-visible error
        can be matched with the server-side log line.
    """

    HEADER = "X-Request-Id"
    META_KEY = "HTTP_X_REQUEST_ID"

    _VALID = re.compile(r"^[A-Za-z0-9\-_.]{8,128}$")

    def process_request(self, request):
        incoming = request.META.get(self.META_KEY, "")
        if incoming and self._VALID.match(incoming):
            request.request_id = incoming
        else:
            request.request_id = None
        ensure_request_id(request)
        return None

    def process_response(self, request, response):
        rid = getattr(request, "request_id", None)
        if rid and not response.has_header(self.HEADER):
            response[self.HEADER] = rid
        return response
