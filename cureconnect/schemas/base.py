"""Base schema classes."""

from pydantic import BaseModel, ConfigDict


class BaseResponse(BaseModel):
    """Base for all response schemas with from_attributes config."""

    model_config = ConfigDict(from_attributes=True)


class CamelRequest(BaseModel):
    """Request body accepting the camelCase keys sent by the web client."""

    model_config = ConfigDict(populate_by_name=True)
