"""Core domain models for mentorship profiles.

This module defines the data structures shared by the ordering engine and its
collaborators:
- Profile: a user's mentorship profile, read-only to the engine
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """A user's mentorship profile.

    Profiles arrive from the profile store (local records merged with any
    remote sync results). The engine treats them as immutable shared
    references: ordering returns the very same instances it was given.

    Free-text fields are kept exactly as entered. Scoring relies on literal
    substring containment, so no stripping or case folding happens here.

    Field names follow Python conventions; the camelCase names used by the
    mobile app's stored records are accepted as aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "expertise": "Machine Learning",
                "interest": "Public Speaking",
                "expertiseYears": 7,
                "interestYears": 1,
                "email": "ada@example.com",
                "phoneNumber": "+15550100",
                "location": "London",
            }
        },
    )

    name: str = Field(..., description="Display name")
    expertise: str = Field(..., description="What the person can teach or offer")
    interest: str = Field(..., description="What the person wants to learn")
    expertise_years: int = Field(
        0, ge=0, alias="expertiseYears", description="Years of experience in expertise"
    )
    interest_years: int = Field(
        0, ge=0, alias="interestYears", description="Years of experience in interest"
    )
    email: str = Field(..., description="Unique profile identifier, also used as seed material")
    phone_number: str = Field("", alias="phoneNumber", description="Opaque contact number")
    location: Optional[str] = Field(None, description="Optional free-text location")
    created_at: Optional[str] = Field(None, alias="createdAt", description="Creation timestamp")
    updated_at: Optional[str] = Field(None, alias="updatedAt", description="Last update timestamp")

    @field_validator("location")
    @classmethod
    def blank_location_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat a whitespace-only location as missing."""
        if v is None:
            return None
        return v if v.strip() else None

    @property
    def display_name(self) -> str:
        """Name to show in listings, falling back to the email."""
        return self.name.strip() or self.email
