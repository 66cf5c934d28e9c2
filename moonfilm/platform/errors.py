"""
Errors raised by the hosted platform clients.
"""
import httpx


class PlatformError(Exception):
    """A non-2xx response from one of the hosted APIs."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message

    @classmethod
    def from_response(cls, response: httpx.Response) -> "PlatformError":
        message = response.text
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = (
                body.get("error_description")
                or body.get("msg")
                or body.get("message")
                or body.get("error")
                or message
            )
        return cls(response.status_code, str(message))


def raise_for_status(response: httpx.Response) -> None:
    if response.is_error:
        raise PlatformError.from_response(response)
