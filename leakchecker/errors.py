from typing import Dict, Optional


# ---------------- Proxy side ----------------
class ProxyError(Exception):
    """Failure of a /check-email-breach request, rendered as a JSON error body."""

    status_code = 500
    error = "Failed to check email breach"

    def __init__(self, details: Optional[str] = None):
        super().__init__(details or self.error)
        self.details = details

    def to_dict(self) -> Dict[str, str]:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidInput(ProxyError):
    status_code = 400
    error = "Email is required"

    def __init__(self):
        super().__init__(None)


class UpstreamError(ProxyError):
    def __init__(self, status: int):
        super().__init__(f"HIBP API returned {status}")
        self.status = status


# ---------------- Presentation side ----------------
class SearchError(Exception):
    """A search attempt that ended without a result. str(exc) is shown to the user."""

    message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class EmptyResponse(SearchError):
    message = "Empty response from server"


class MalformedResponse(SearchError):
    message = "Invalid response from server"


class ServiceError(SearchError):
    message = "Failed to check email"

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class NetworkError(SearchError):
    message = "Failed to reach the server"
