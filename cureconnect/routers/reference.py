"""Public, read-only reference data endpoints."""

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from cureconnect.deps import DbSession
from cureconnect.logger import get_logger
from cureconnect.schemas import DiseaseResponse, DiseaseSolutionResponse, MedicineResponse
from cureconnect.services import reference
from cureconnect.utils.exceptions import raise_internal_error

router = APIRouter(tags=["reference"])
logger = get_logger(__name__)


@router.get("/getDiseaseSolutions", response_model=list[DiseaseSolutionResponse])
async def get_disease_solutions(db: DbSession) -> list[DiseaseSolutionResponse]:
    try:
        rows = await reference.list_disease_solutions(db)
    except SQLAlchemyError as e:
        logger.exception("Error fetching disease solutions")
        raise_internal_error("Error fetching disease solutions", cause=e)
    return [DiseaseSolutionResponse.model_validate(row) for row in rows]


@router.get("/getDiseases", response_model=list[DiseaseResponse])
async def get_diseases(db: DbSession) -> list[DiseaseResponse]:
    try:
        diseases = await reference.list_diseases(db)
    except SQLAlchemyError as e:
        logger.exception("Error fetching diseases")
        raise_internal_error("Error fetching diseases", cause=e)
    return [DiseaseResponse(disease=disease) for disease in diseases]


@router.get("/getMedicine", response_model=list[MedicineResponse])
async def get_medicine(db: DbSession) -> list[MedicineResponse]:
    """Products with their target disease and purchase link."""
    try:
        rows = await reference.list_medicines(db)
    except SQLAlchemyError as e:
        logger.exception("Error fetching medicines")
        raise_internal_error("Error fetching medicine data", cause=e)
    return [MedicineResponse.model_validate(row) for row in rows]
