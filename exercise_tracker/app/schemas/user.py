"""
Pydantic models for user data.

Users are created from a single ``username`` form field, so there is
no request schema; ``UserRead`` is what every user route returns.
"""

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API.  The log is never included."""

    username: str = Field(..., example="fcc_test")
    id: str = Field(..., example="5fb5853f734231456ccb3b05")

    model_config = {
        "from_attributes": True,
    }
