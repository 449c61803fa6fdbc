from memoapp.shared.config import GEMINI_API_KEY_ENV

SUMMARY_FAILED = "Failed to generate summary"


class GatewayError(Exception):
    """Error the summarize route reports to the caller as {"error": message}."""

    status_code = 500
    message = SUMMARY_FAILED

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ConfigurationError(GatewayError):
    status_code = 500
    message = f"{GEMINI_API_KEY_ENV} is not defined"


class ContentValidationError(GatewayError):
    status_code = 400
    message = "Content is required"


class ProviderError(GatewayError):
    # message stays generic; the provider exception is chained and logged
    status_code = 500
    message = SUMMARY_FAILED
