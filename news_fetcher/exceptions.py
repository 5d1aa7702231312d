from __future__ import annotations


class NewsFetcherError(Exception):
    """Base class for errors raised by news_fetcher."""


class ConfigError(NewsFetcherError):
    """Raised when the client cannot be configured at startup."""


class MissingCredentialError(ConfigError):
    """Raised when the API key is absent from both the environment and the env file."""

    def __init__(self, var_name: str, env_file: str) -> None:
        self.var_name = var_name
        self.env_file = env_file
        super().__init__(
            f"API key '{var_name}' was not found in the environment or in {env_file}."
        )


class RequestError(NewsFetcherError):
    """Base class for failures of a single API request. The shell recovers from these."""


class InvalidRequestError(RequestError):
    """Raised when a request URL cannot be built from the given parameters."""


class TransportError(RequestError):
    """Raised when the request cannot be sent or no response arrives."""


class ParseError(RequestError):
    """Raised when a response body is not JSON or matches neither response shape."""


class ApiError(RequestError):
    """Raised when the provider answers with a well-formed error body."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"API error: {message} ({code})")
