"""Property Schemas — request bodies, transfer request and public-facing property data.

Invariants:
    - PropertyWrite carries address, owner_id, tokenized_shares; range checks happen in core
    - PropertyResponse.history preserves insertion order
    - Write bodies are strict: JSON true or "5" is never coerced to an int

Design Decisions:
    - TransferRequest carries no property id: it comes from the URL path
"""

from pydantic import BaseModel, ConfigDict

from estate_ledger.core.entities import PropertyPayload


class PropertyWrite(BaseModel):
    """Body for POST /properties and PUT /properties/{id}."""
    model_config = ConfigDict(strict=True)

    address: str
    owner_id: int
    tokenized_shares: int

    def to_payload(self) -> PropertyPayload:
        return PropertyPayload(
            address=self.address,
            owner_id=self.owner_id,
            tokenized_shares=self.tokenized_shares,
        )


class TransferRequest(BaseModel):
    """Body for POST /properties/{id}/transfer."""
    model_config = ConfigDict(strict=True)

    from_user_id: int
    to_user_id: int
    shares: int


class HistoryEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    event: str
    timestamp: int


class PropertyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    address: str
    owner_id: int
    tokenized_shares: int
    created_at: int
    created_by: str
    updated_at: int | None = None
    updated_by: str | None = None
    history: list[HistoryEntryResponse] = []
