"""Webhook request errors rendered as ``{"error": <reason>}`` JSON responses."""


class SlackRequestError(Exception):
    """A Slack webhook request that must be rejected with an HTTP error.

    Raised from the request dependencies (signature check, payload parsing,
    dispatch) and turned into a JSON response by the app's exception handler.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
