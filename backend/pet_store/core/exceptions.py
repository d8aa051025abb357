"""
Custom exception hierarchy for structured error handling.

WHY: Custom exceptions provide:
1. Consistent error handling across the API
2. HTTP status code mapping for FastAPI
3. Structured error responses with contextual data
4. A clear split between "doesn't exist" (404) and
   "exists but doesn't belong here" (400)

IMPORTANT: Services raise these exceptions; they never build HTTP responses.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    WHY: Centralizing exception handling in a base class ensures consistent
    error responses and HTTP status code mapping.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        **context: Any,
    ):
        """
        Initialize exception with message and context.

        Args:
            message: Human-readable error message
            status_code: HTTP status code (overrides class default)
            **context: Identifiers involved in the failure (pet_store_id, ...)
        """
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.context = context
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for JSON response.

        Returns:
            Dictionary with error details
        """
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.context if self.context else None,
        }


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationError(AppException):
    """
    Raised when a request is well-formed but refers to entities that
    violate a relationship rule.

    HTTP Status: 400 Bad Request
    """

    status_code = 400
    default_message = "Validation failed"


class EmployeeStoreMismatchError(ValidationError):
    """
    Raised when an existing employee is addressed through a pet store
    other than the one it works at.

    HTTP Status: 400 Bad Request
    """

    default_message = "Employee does not work at this pet store"

    def __init__(self, employee_id: int, pet_store_id: int):
        super().__init__(
            message=(
                f"Employee with ID={employee_id} does not work at the "
                f"pet store with ID={pet_store_id}"
            ),
            employee_id=employee_id,
            pet_store_id=pet_store_id,
        )


class CustomerNotPatronError(ValidationError):
    """
    Raised when an existing customer is addressed through a pet store
    it is not a patron of.

    HTTP Status: 400 Bad Request
    """

    default_message = "Customer is not a patron of this pet store"

    def __init__(self, customer_id: int, pet_store_id: int):
        super().__init__(
            message=(
                f"Customer with ID={customer_id} is not a patron of the "
                f"pet store with ID={pet_store_id}"
            ),
            customer_id=customer_id,
            pet_store_id=pet_store_id,
        )


# ============================================================================
# Resource Exceptions
# ============================================================================


class ResourceNotFoundError(AppException):
    """
    Raised when a requested resource doesn't exist.

    WHY: 404 Not Found is the standard HTTP status for missing resources.
    Including resource type and ID in context helps debugging.

    HTTP Status: 404 Not Found
    """

    status_code = 404
    default_message = "Resource not found"


class PetStoreNotFoundError(ResourceNotFoundError):
    """HTTP Status: 404 Not Found"""

    default_message = "Pet store not found"

    def __init__(self, pet_store_id: int):
        super().__init__(
            message=f"Pet store with ID={pet_store_id} does not exist.",
            pet_store_id=pet_store_id,
        )


class EmployeeNotFoundError(ResourceNotFoundError):
    """HTTP Status: 404 Not Found"""

    default_message = "Employee not found"

    def __init__(self, employee_id: int):
        super().__init__(
            message=f"Employee with ID={employee_id} does not exist.",
            employee_id=employee_id,
        )


class CustomerNotFoundError(ResourceNotFoundError):
    """HTTP Status: 404 Not Found"""

    default_message = "Customer not found"

    def __init__(self, customer_id: int):
        super().__init__(
            message=f"Customer with ID={customer_id} does not exist.",
            customer_id=customer_id,
        )


class OperationNotAllowedError(AppException):
    """
    Raised when a route exists but the operation is refused outright
    (e.g. deleting every pet store at once).

    HTTP Status: 405 Method Not Allowed
    """

    status_code = 405
    default_message = "Operation not allowed"
