"""Pydantic schemas for reference data."""

from pydantic import AliasChoices, Field

from cureconnect.schemas.base import BaseResponse


class DiseaseSolutionResponse(BaseResponse):
    id: int
    disease: str
    solution: str


class DiseaseResponse(BaseResponse):
    disease: str


class MedicineResponse(BaseResponse):
    """A disease product exposed under the client's ``name``/``link`` keys."""

    id: int
    name: str = Field(validation_alias=AliasChoices("product", "name"))
    disease: str
    link: str | None = Field(default=None, validation_alias=AliasChoices("purchase_link", "link"))
