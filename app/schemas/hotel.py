"""Pydantic schemas for hotel inventory requests and responses."""

from pydantic import AliasChoices, BaseModel, Field, field_validator


def _not_blank(v: str | None) -> str | None:
    if v is not None and not v.strip():
        raise ValueError("cannot be blank")
    return v


class HotelRequest(BaseModel):
    """Body for POST /hotels. Accepts the legacy camelCase `noOfRooms` as well."""

    name: str = Field(..., min_length=1, max_length=255, description="Hotel name")
    description: str = Field(..., min_length=1, description="Hotel description")
    no_of_rooms: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("no_of_rooms", "noOfRooms"),
        description="Rooms available for booking; defaults to 0",
    )
    address: str = Field(..., min_length=1, max_length=1024, description="Street address")
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @field_validator("name", "description", "address")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        return _not_blank(v)


class HotelUpdateRequest(BaseModel):
    """Body for PUT /hotels/{id}. Only fields that are present and non-null are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    no_of_rooms: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("no_of_rooms", "noOfRooms"),
    )
    address: str | None = Field(default=None, min_length=1, max_length=1024)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @field_validator("name", "description", "address")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        return _not_blank(v)


class LocationResponse(BaseModel):
    id: int
    address: str
    latitude: float | None = None
    longitude: float | None = None

    class Config:
        from_attributes = True


class HotelResponse(BaseModel):
    id: int
    name: str
    description: str
    no_of_rooms: int
    location: LocationResponse | None = None

    class Config:
        from_attributes = True
