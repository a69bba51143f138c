"""Read-only reference data about diseases and matching products."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cureconnect.database import Base


class DiseaseSolution(Base):
    __tablename__ = "disease_solutions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    disease: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    solution: Mapped[str] = mapped_column(Text, nullable=False)


class DiseaseProduct(Base):
    __tablename__ = "disease_products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product: Mapped[str] = mapped_column(String(255), nullable=False)
    disease: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    purchase_link: Mapped[str | None] = mapped_column(String(1024), nullable=True)
