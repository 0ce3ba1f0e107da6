class AssistantError(Exception):
    """Base error for the assistant request path."""


class AssistantConfigurationError(AssistantError):
    def __init__(self, message: str = "OpenAI API key not configured"):
        super().__init__(message)


class AssistantUpstreamError(AssistantError):
    def __init__(self, status_code: int, message: str = "Failed to get AI response"):
        super().__init__(message)
        self.status_code = int(status_code)
