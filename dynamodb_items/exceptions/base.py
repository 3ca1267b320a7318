from typing import Any, Dict, Optional


class DynamoDBWrapperError(Exception):
    """Base exception for all dynamodb_items errors.

    Service failures are wrapped by ``map_dynamodb_error``; local failures
    (bad item identity, empty update expression) are raised directly.

    Attributes:
        message: Human-readable error message
        original_error: The underlying exception, usually a botocore ClientError
        context: Table, key or validation details attached by the subclass
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: ClientError or pydantic error being wrapped, if any
            context: Extra key/value details rendered by ``__str__``
        """
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message followed by ``(Context: k=v, ...)`` when context is set."""
        error_str = self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            error_str += f" (Context: {context_str})"
        return error_str

    def __repr__(self) -> str:
        """Return a representation including the wrapped error and context."""
        return f"{self.__class__.__name__}(message={self.message!r}, original_error={self.original_error!r}, context={self.context!r})"
