"""Employee and department models for the Supabase employee tables."""

from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator


class EmploymentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Department(BaseModel):
    id: str
    name: str


class Employee(BaseModel):
    """Employee row as returned by the backend, optionally joined with its department."""

    id: str
    employee_code: str = Field(validation_alias=AliasChoices("employee_code", "employee_id"))
    full_name: str
    email: str | None = None
    phone_number: str | None = None
    department_id: str | None = None
    department: Department | None = Field(
        default=None, validation_alias=AliasChoices("department", "departments")
    )
    role: str = ""
    date_of_joining: str = ""
    employment_status: EmploymentStatus = EmploymentStatus.ACTIVE
    created_at: str | None = None
    updated_at: str | None = None


class EmployeeInput(BaseModel):
    """Payload for creating or updating an employee."""

    employee_code: str = Field(min_length=1, max_length=20)
    full_name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone_number: str | None = None
    department_id: str | None = None
    role: str = Field(min_length=2, max_length=100)
    date_of_joining: str = Field(min_length=1)
    employment_status: EmploymentStatus = EmploymentStatus.ACTIVE

    @field_validator("phone_number", "department_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_row(self) -> dict[str, str | None]:
        """Serialize with the backend's column names."""
        row = self.model_dump(mode="json")
        row["employee_id"] = row.pop("employee_code")
        return row


class EmployeeSnapshot(BaseModel):
    employees: list[Employee] = []
    departments: list[Department] = []


class MutationResult(BaseModel):
    """Notification shown to the user after a successful mutation."""

    title: str
    description: str
    employee: Employee | None = None
