"""Domain exceptions."""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    # Hey future me, we store message as an attribute so code can inspect it without parsing str(exception).
    # Always raise a specific subclass so callers can catch precisely.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class ValidationError(DomainException):
    """Input validation failed.

    Example:
        raise ValidationError("Cannot derive a file extension from content type 'image/'")
    """

    pass


class ConfigurationError(DomainException):
    """Application misconfiguration.

    Example:
        raise ConfigurationError("Image storage path is not a directory")
    """

    pass


class ExternalServiceError(DomainException):
    """External service (HTTP host, live TV backend) returned an error."""

    pass


class HttpError(ExternalServiceError):
    """An HTTP request failed.

    Hey future me - status_code is None when we never got a response (timeout,
    DNS, connection refused). Check is_not_found instead of comparing numbers
    at call sites!
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url

    @property
    def is_not_found(self) -> bool:
        """Check if the remote resource simply doesn't exist (404)."""
        return self.status_code == 404


class ImageNotFoundError(HttpError):
    """The remote image URL answered 404.

    This is the ONLY error the program image refresh recovers from.
    """

    def __init__(self, url: str | None = None) -> None:
        super().__init__(f"Image not found: {url}", status_code=404, url=url)


class InvalidImageResponseError(ExternalServiceError):
    """The remote host answered, but not with an image content type."""

    def __init__(self, content_type: str | None, url: str | None = None) -> None:
        super().__init__(
            f"Provider did not return an image content type (got '{content_type}')"
        )
        self.content_type = content_type
        self.url = url


__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "ExternalServiceError",
    "HttpError",
    "ImageNotFoundError",
    "InvalidImageResponseError",
]
