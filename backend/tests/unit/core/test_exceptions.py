"""
Tests for custom exception hierarchy.

WHY: Exception testing ensures:
1. Exceptions serialize correctly
2. HTTP status codes map correctly (404 vs 400 for relationship errors)
3. Messages name the offending identifiers
4. Exception handlers work as expected
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pet_store.core.exceptions import (
    AppException,
    ValidationError,
    ResourceNotFoundError,
    PetStoreNotFoundError,
    EmployeeNotFoundError,
    CustomerNotFoundError,
    EmployeeStoreMismatchError,
    CustomerNotPatronError,
    OperationNotAllowedError,
)
from pet_store.core.exception_handlers import register_exception_handlers


class TestAppException:
    """Test base AppException class."""

    def test_default_message(self):
        """Verify default message is used when none provided."""
        exc = AppException()
        assert exc.message == "An unexpected error occurred"
        assert exc.status_code == 500

    def test_custom_message(self):
        """Verify custom message overrides default."""
        exc = AppException(message="Custom error message")
        assert exc.message == "Custom error message"
        assert str(exc) == "Custom error message"

    def test_custom_status_code(self):
        """Verify custom status code overrides class default."""
        exc = AppException(status_code=418)
        assert exc.status_code == 418

    def test_context_data(self):
        """Verify context data is stored."""
        exc = AppException(pet_store_id=1, employee_id=2)
        assert exc.context == {"pet_store_id": 1, "employee_id": 2}

    def test_to_dict_basic(self):
        """Verify exception serializes to dict correctly."""
        exc = AppException(message="Test error", pet_store_id=7)
        result = exc.to_dict()

        assert result["error"] == "AppException"
        assert result["message"] == "Test error"
        assert result["status_code"] == 500
        assert result["details"] == {"pet_store_id": 7}

    def test_to_dict_no_context(self):
        """Verify to_dict works with no context data."""
        exc = AppException(message="Test error")
        assert exc.to_dict()["details"] is None


class TestNotFoundExceptions:
    """Test the NotFound family."""

    @pytest.mark.parametrize(
        "exc_class, message",
        [
            (PetStoreNotFoundError, "Pet store with ID=5 does not exist."),
            (EmployeeNotFoundError, "Employee with ID=5 does not exist."),
            (CustomerNotFoundError, "Customer with ID=5 does not exist."),
        ],
    )
    def test_not_found_messages(self, exc_class, message):
        """Verify each NotFound error is a 404 naming the missing ID."""
        exc = exc_class(5)
        assert isinstance(exc, ResourceNotFoundError)
        assert exc.status_code == 404
        assert exc.message == message

    def test_pet_store_not_found_context(self):
        exc = PetStoreNotFoundError(99)
        assert exc.to_dict()["details"] == {"pet_store_id": 99}


class TestRelationshipExceptions:
    """Test the exists-but-doesn't-belong-here family."""

    def test_employee_store_mismatch(self):
        """Verify mismatch is a 400 ValidationError, not a NotFound."""
        exc = EmployeeStoreMismatchError(employee_id=3, pet_store_id=2)

        assert isinstance(exc, ValidationError)
        assert not isinstance(exc, ResourceNotFoundError)
        assert exc.status_code == 400
        assert exc.message == "Employee with ID=3 does not work at the pet store with ID=2"
        assert exc.context == {"employee_id": 3, "pet_store_id": 2}

    def test_customer_not_patron(self):
        exc = CustomerNotPatronError(customer_id=4, pet_store_id=1)

        assert isinstance(exc, ValidationError)
        assert exc.status_code == 400
        assert exc.message == "Customer with ID=4 is not a patron of the pet store with ID=1"

    def test_operation_not_allowed(self):
        exc = OperationNotAllowedError(message="Deleting all pet stores is not allowed.")
        assert exc.status_code == 405

    def test_domain_errors_are_client_errors(self):
        """Every concrete error raised by the services maps to a 4xx status."""
        pending = list(AppException.__subclasses__())
        seen = set()
        while pending:
            exc_class = pending.pop()
            seen.add(exc_class)
            pending.extend(exc_class.__subclasses__())

        assert seen == {
            ValidationError,
            EmployeeStoreMismatchError,
            CustomerNotPatronError,
            ResourceNotFoundError,
            PetStoreNotFoundError,
            EmployeeNotFoundError,
            CustomerNotFoundError,
            OperationNotAllowedError,
        }
        assert {exc_class.status_code for exc_class in seen} == {400, 404, 405}


class TestExceptionHandler:
    """Test FastAPI exception handler integration."""

    @pytest.fixture
    def test_client(self):
        """Create app with the handlers registered and a few failing routes."""
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/not-found")
        async def not_found():
            raise PetStoreNotFoundError(42)

        @app.get("/mismatch")
        async def mismatch():
            raise EmployeeStoreMismatchError(employee_id=1, pet_store_id=2)

        @app.get("/items/{item_id}")
        async def item(item_id: int):
            return {"item_id": item_id}

        @app.get("/boom")
        async def boom():
            raise RuntimeError("internal detail")

        return TestClient(app, raise_server_exceptions=False)

    def test_not_found_response(self, test_client):
        """Verify NotFound returns 404 with structured body."""
        response = test_client.get("/not-found")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "PetStoreNotFoundError"
        assert data["message"] == "Pet store with ID=42 does not exist."
        assert data["details"] == {"pet_store_id": 42}

    def test_mismatch_response(self, test_client):
        """Verify relationship errors return 400."""
        response = test_client.get("/mismatch")

        assert response.status_code == 400
        assert response.json()["error"] == "EmployeeStoreMismatchError"

    def test_request_validation_response(self, test_client):
        """Verify malformed path params return 400 in the same shape."""
        response = test_client.get("/items/not-a-number")

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "ValidationError"
        assert data["details"]["errors"][0]["field"] == "path.item_id"

    def test_unknown_route_response(self, test_client):
        response = test_client.get("/nowhere")

        assert response.status_code == 404
        assert response.json()["error"] == "HTTPException"

    def test_unexpected_error_hides_details(self, test_client):
        """Verify unexpected errors return a generic 500."""
        response = test_client.get("/boom")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "InternalServerError"
        assert "internal detail" not in data["message"]
