"""
Retry logic with exponential backoff for AWS attribute API calls.

Throttling and transient service errors from SQS and SNS are retried with
exponential backoff. Validation errors, missing resources and permission
errors fail immediately.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any, Callable, TypeVar

from aws_lambda_powertools import Logger
from botocore.exceptions import (
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from resource_attrmap.core.config import SERVICE_NAME

logger = Logger(service=SERVICE_NAME, child=True)

T = TypeVar("T")


class ErrorCategory(Enum):
    """Categories of errors for retry decision making."""

    RETRYABLE = "retryable"
    NON_RETRYABLE = "non_retryable"


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_retries: int = 3
    initial_backoff_seconds: float = 1.0
    backoff_multiplier: float = 2.0
    max_backoff_seconds: float = 8.0


@dataclass
class RetryResult:
    """Result of a retry operation."""

    success: bool
    result: Any | None = None
    error_message: str | None = None
    attempt_count: int = 0
    last_error: Exception | None = None


# AWS error codes for throttling and transient service faults
RETRYABLE_ERROR_CODES: set[str] = {
    "Throttling",
    "ThrottlingException",
    "ThrottledException",
    "RequestThrottled",
    "RequestThrottledException",
    "TooManyRequestsException",
    "RequestLimitExceeded",
    "ServiceUnavailable",
    "InternalError",
    "InternalFailure",
    "KMSThrottling",
}

RETRYABLE_STATUS_CODES: set[int] = {429, 500, 502, 503, 504}

RETRYABLE_EXCEPTIONS: tuple[type[Exception], ...] = (
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

CAUGHT_EXCEPTIONS: tuple[type[Exception], ...] = (ClientError,) + RETRYABLE_EXCEPTIONS


def get_error_code(exception: Exception) -> str | None:
    """Extract the AWS error code from a botocore ClientError."""
    if isinstance(exception, ClientError):
        return exception.response.get("Error", {}).get("Code")
    return None


def get_status_code(exception: Exception) -> int | None:
    """Extract the HTTP status code from a botocore ClientError."""
    if isinstance(exception, ClientError):
        return exception.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return None


def classify_error(exception: Exception) -> ErrorCategory:
    """
    Classify an error as retryable or non-retryable.

    Args:
        exception: Exception raised by a boto3 call

    Returns:
        ErrorCategory indicating whether the error should be retried
    """
    if isinstance(exception, RETRYABLE_EXCEPTIONS):
        return ErrorCategory.RETRYABLE

    if get_error_code(exception) in RETRYABLE_ERROR_CODES:
        return ErrorCategory.RETRYABLE

    status_code = get_status_code(exception)
    if status_code is not None and status_code in RETRYABLE_STATUS_CODES:
        return ErrorCategory.RETRYABLE

    return ErrorCategory.NON_RETRYABLE


def is_retryable_error(exception: Exception) -> bool:
    return classify_error(exception) == ErrorCategory.RETRYABLE


def calculate_backoff(attempt: int, config: RetryConfig) -> float:
    """
    Calculate the backoff delay for a given retry attempt.

    Uses exponential backoff: delay = initial * (multiplier ^ attempt),
    capped at max_backoff_seconds.

    Args:
        attempt: The current attempt number (0-indexed)
        config: Retry configuration

    Returns:
        Backoff delay in seconds
    """
    delay = config.initial_backoff_seconds * (config.backoff_multiplier**attempt)
    return min(delay, config.max_backoff_seconds)


def execute_with_retry(
    operation: Callable[[], T],
    config: RetryConfig | None = None,
    operation_name: str = "operation",
) -> RetryResult:
    """
    Execute an operation with retry logic and exponential backoff.

    Only botocore errors are caught; anything else propagates unchanged.

    Args:
        operation: A callable performing the AWS call. Should raise on failure.
        config: Retry configuration. Uses defaults if not provided.
        operation_name: Name of the operation for logging purposes.

    Returns:
        RetryResult containing success status, result or error information,
        and the number of attempts made.
    """
    if config is None:
        config = RetryConfig()

    last_exception: Exception | None = None
    attempt_count = 0

    for attempt in range(config.max_retries + 1):
        attempt_count = attempt + 1

        try:
            result = operation()
            logger.debug(
                f"{operation_name} succeeded",
                extra={"operation": operation_name, "attempt": attempt_count},
            )
            return RetryResult(
                success=True,
                result=result,
                attempt_count=attempt_count,
            )

        except CAUGHT_EXCEPTIONS as e:
            last_exception = e
            error_code = get_error_code(e)

            if not is_retryable_error(e):
                logger.warning(
                    f"{operation_name} failed with non-retryable error",
                    extra={
                        "operation": operation_name,
                        "attempt": attempt_count,
                        "error": str(e),
                        "error_code": error_code,
                        "retryable": False,
                    },
                )
                return RetryResult(
                    success=False,
                    error_message=str(e),
                    attempt_count=attempt_count,
                    last_error=e,
                )

            if attempt >= config.max_retries:
                logger.error(
                    f"{operation_name} failed after all retry attempts",
                    extra={
                        "operation": operation_name,
                        "total_attempts": attempt_count,
                        "error": str(e),
                        "error_code": error_code,
                    },
                )
                return RetryResult(
                    success=False,
                    error_message=str(e),
                    attempt_count=attempt_count,
                    last_error=e,
                )

            backoff = calculate_backoff(attempt, config)
            logger.warning(
                f"{operation_name} failed, retrying in {backoff}s",
                extra={
                    "operation": operation_name,
                    "attempt": attempt_count,
                    "max_retries": config.max_retries + 1,
                    "backoff_seconds": backoff,
                    "error": str(e),
                    "error_code": error_code,
                },
            )
            time.sleep(backoff)

    return RetryResult(
        success=False,
        error_message=str(last_exception) if last_exception else "Unknown error",
        attempt_count=attempt_count,
        last_error=last_exception,
    )


def retry_decorator(
    config: RetryConfig | None = None,
    operation_name: str | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator that adds retry logic with exponential backoff to a function.

    The last error is re-raised when all attempts fail.

    Example:
        ```python
        @retry_decorator(config=RetryConfig(max_retries=3))
        def list_queues():
            return sqs.list_queues()
        ```
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            name = operation_name or func.__name__

            def operation() -> T:
                return func(*args, **kwargs)

            result = execute_with_retry(
                operation=operation,
                config=config,
                operation_name=name,
            )

            if result.success:
                return result.result
            if result.last_error:
                raise result.last_error
            raise RuntimeError(result.error_message)

        return wrapper

    return decorator
