"""Read-only queries over the disease reference tables."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cureconnect.logger import async_log_timing, get_logger
from cureconnect.models import DiseaseProduct, DiseaseSolution

logger = get_logger(__name__)


async def list_disease_solutions(db: AsyncSession) -> list[DiseaseSolution]:
    async with async_log_timing("list_disease_solutions", logger=logger, level="debug") as ctx:
        result = await db.execute(select(DiseaseSolution).order_by(DiseaseSolution.id))
        rows = list(result.scalars().all())
        ctx["rows"] = len(rows)
    return rows


async def list_diseases(db: AsyncSession) -> list[str]:
    """Distinct disease names that have at least one product."""
    async with async_log_timing("list_diseases", logger=logger, level="debug") as ctx:
        result = await db.execute(
            select(DiseaseProduct.disease).distinct().order_by(DiseaseProduct.disease)
        )
        diseases = list(result.scalars().all())
        ctx["rows"] = len(diseases)
    return diseases


async def list_medicines(db: AsyncSession) -> list[DiseaseProduct]:
    async with async_log_timing("list_medicines", logger=logger, level="debug") as ctx:
        result = await db.execute(select(DiseaseProduct).order_by(DiseaseProduct.id))
        rows = list(result.scalars().all())
        ctx["rows"] = len(rows)
    return rows
