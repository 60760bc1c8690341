"""
UserRecord Data Model.

Pydantic models for the records returned by the directory endpoint.
Records are immutable once fetched; unknown payload keys are ignored.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Address(BaseModel):
    """Postal address; only street, suite and city are displayed."""
    model_config = ConfigDict(frozen=True)

    street: str = Field(..., description="Street line")
    suite: str = Field(..., description="Suite / apartment")
    city: str = Field(..., description="City, used by the city filter")
    zipcode: Optional[str] = Field(None, description="Postal code")


class Company(BaseModel):
    """Employer; the name drives the company filter."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Company name")
    catch_phrase: Optional[str] = Field(None, alias="catchPhrase")
    bs: Optional[str] = None


class UserRecord(BaseModel):
    """
    Data model for a single directory entry.

    Attributes:
        id: Unique identifier (opaque, used as the expand-state key)
        name: Display name
        username: Handle, shown as "@username"
        email, phone, website: Opaque contact strings
        address: Address with street, suite and city
        company: Company with name

    Example:
        user = UserRecord.model_validate({
            "id": 1, "name": "Leanne Graham", "username": "Bret", ...
        })
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique identifier")
    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Handle")
    email: str = Field("", description="Email address")
    phone: str = Field("", description="Phone number")
    website: str = Field("", description="Website")
    address: Address
    company: Company

    @property
    def initial(self) -> str:
        """First character of the name, used for the avatar."""
        return self.name[:1]

    @property
    def handle(self) -> str:
        return f"@{self.username}"


# Validator for a whole payload (ordered list of records)
UserCollectionAdapter = TypeAdapter(list[UserRecord])
