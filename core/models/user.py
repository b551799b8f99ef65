# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: A stored user record (also the response body)
# - UserCreate: Input for creating a new user
# - UserUpdate: Input for a partial update
#
# JSON uses camelCase field names (firstName, lastName). Python code uses
# snake_case; both spellings are accepted on input.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class User(CamelModel):
    """
    A user record held by the store.

    Example:
        {
            "id": 1,
            "firstName": "John",
            "lastName": "Doe",
            "email": "john.doe@hr.com",
            "department": "HR"
        }
    """

    # Assigned by the store, never by the client
    id: int = Field(..., description="Unique user identifier")

    first_name: str = Field(..., description="First name")

    last_name: str = Field(..., description="Last name")

    # Unique across the store (checked on create)
    email: str = Field(..., description="Email address")

    department: str = Field(..., description="Department, e.g. HR or IT")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "firstName": "John",
                "lastName": "Doe",
                "email": "john.doe@hr.com",
                "department": "HR",
            }
        }
    )


class UserCreate(CamelModel):
    """
    Schema for creating a new user.

    Any `id` in the payload is ignored; the store assigns one.
    Email is optional at the schema level so that a missing or empty email
    is reported with the service's own message.
    """

    first_name: str = Field(..., description="First name")

    last_name: str = Field(..., description="Last name")

    email: str | None = Field(default=None, description="Email address (required, non-empty)")

    department: str = Field(..., description="Department")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Ana",
                "lastName": "García",
                "email": "ana.garcia@it.com",
                "department": "IT",
            }
        }
    )


class UserUpdate(CamelModel):
    """
    Schema for a partial user update.

    A field is applied only when it is present in the payload with a
    non-null value. Absent fields and explicit nulls both keep the
    stored value.

    Example:
        {"department": "IT"}    # only department changes
    """

    first_name: str | None = Field(default=None, description="New first name")

    last_name: str | None = Field(default=None, description="New last name")

    email: str | None = Field(default=None, description="New email (not re-checked for uniqueness)")

    department: str | None = Field(default=None, description="New department")

    def changes(self) -> dict[str, Any]:
        """
        Fields supplied with a value, keyed by their snake_case name.

        Returns:
            Mapping of field name -> new value for every supplied field
        """
        return self.model_dump(exclude_unset=True, exclude_none=True)
