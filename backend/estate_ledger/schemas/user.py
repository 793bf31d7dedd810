"""User Schemas — request bodies and public-facing user data.

Invariants:
    - UserWrite fields are required strings; blank checks happen in the core validator
    - UserWrite is strict: non-string JSON values are rejected, not stringified
    - to_payload() is the only bridge from API schema to core payload
"""

from pydantic import BaseModel, ConfigDict

from estate_ledger.core.entities import UserPayload


class UserWrite(BaseModel):
    """Body for POST /users and PUT /users/{id}."""
    model_config = ConfigDict(strict=True)

    name: str
    contact_info: str

    def to_payload(self) -> UserPayload:
        return UserPayload(name=self.name, contact_info=self.contact_info)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    contact_info: str
    created_at: int
    created_by: str
    updated_at: int | None = None
    updated_by: str | None = None
