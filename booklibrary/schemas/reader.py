"""
Reader Pydantic Schemas

These schemas define the shape of data for Reader-related API operations.
"""

from pydantic import BaseModel, ConfigDict, Field


class ReaderBase(BaseModel):
    """Base schema with shared reader fields."""

    name: str = Field(
        ...,
        max_length=255,
        description="Reader's full name",
        examples=["Jonny", "Yevhenii"],
    )


class ReaderCreate(ReaderBase):
    """
    Schema for registering a new reader.

    The store assigns ids. `id` is accepted here only so that a request
    carrying one is answered with a clear 400 instead of being silently
    ignored.
    """

    id: int | None = Field(
        default=None,
        description="Must be omitted; assigned by the database",
    )


class ReaderResponse(ReaderBase):
    """Schema for reader responses."""

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Jonny",
            }
        },
    )
