"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP or any other transport format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - diameter filter is not a positive number
        - Malformed identifiers at the boundary

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "diameter", "message": "Must be positive"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class MissingParameterError(ValidationError):
    """A required request parameter was absent or blank.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "MISSING_PARAMETER"

    def __init__(self, fields: list[str], **context: Any) -> None:
        """Create a missing parameter error.

        Args:
            fields: Names of the missing parameters, in request order
            **context: Additional context
        """
        super().__init__(
            message=f"{' and '.join(fields)} {'is' if len(fields) == 1 else 'are'} required",
            errors=[
                {"field": field, "message": "Field is required", "code": "MISSING"}
                for field in fields
            ],
            **context,
        )


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Car with ID not found
        - Disc with ID not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "Disc")
            identifier: Resource identifier (e.g., UUID, ID)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class NoFittingImageError(DomainError):
    """The car has no pre-rendered image for the requested disc.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NO_FITTING_IMAGE"

    def __init__(self, message: str | None = None, **context: Any) -> None:
        super().__init__(
            message or "No pre-rendered image exists for this car and disc combination",
            hint="Please choose another combination.",
            **context,
        )


class UnsupportedCombinationError(DomainError):
    """A pre-rendered image exists but policy does not expose it.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "UNSUPPORTED_COMBINATION"

    def __init__(self, message: str | None = None, **context: Any) -> None:
        super().__init__(
            message or "Only the Toyota Corolla with Vossen discs is supported",
            hint="Please choose a Toyota Corolla and Vossen discs.",
            **context,
        )


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class StoreError(InternalError):
    """The persistent store failed to answer a query.

    The message carries the underlying driver error for operators.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "STORE_ERROR"


class ImageFetchError(InternalError):
    """A referenced remote image could not be downloaded or encoded.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "IMAGE_FETCH_FAILED"

    def __init__(self, url: str, reason: str, **context: Any) -> None:
        super().__init__(f"Failed to fetch image from {url}: {reason}", url=url, **context)
