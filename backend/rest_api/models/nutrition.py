"""
Nutrition Models: NutrientCategory, Nutrient, TreatingType, ProductNutrient.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, Float, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, TitledMixin

if TYPE_CHECKING:
    from .catalog import Product


class NutrientCategory(TitledMixin, Base):
    """Grouping of nutrients (vitamins, minerals, ...)."""

    __tablename__ = "nutrient_category"

    nutrients: Mapped[list["Nutrient"]] = relationship(
        back_populates="nutrient_category",
        passive_deletes=True,
    )


class Nutrient(TitledMixin, Base):
    """Nutrient with its recommended daily dose."""

    __tablename__ = "nutrient"

    daily_dose: Mapped[Optional[float]] = mapped_column(Float)
    nutrient_category_id: Mapped[int] = mapped_column(
        ForeignKey("nutrient_category.id"), nullable=False, index=True
    )

    nutrient_category: Mapped["NutrientCategory"] = relationship(
        back_populates="nutrients"
    )
    product_nutrients: Mapped[list["ProductNutrient"]] = relationship(
        back_populates="nutrient",
        passive_deletes=True,
    )


class TreatingType(TitledMixin, Base):
    """How a product was treated (raw, boiled, fried, ...)."""

    __tablename__ = "treating_type"

    product_nutrients: Mapped[list["ProductNutrient"]] = relationship(
        back_populates="treating_type",
        passive_deletes=True,
    )


class ProductNutrient(TimestampMixin, Base):
    """
    Amount of a nutrient in a product for a given treating type.
    Join entity: has no title of its own.
    """

    __tablename__ = "product_nutrient"

    product_id: Mapped[int] = mapped_column(
        ForeignKey("product.id"), nullable=False, index=True
    )
    nutrient_id: Mapped[int] = mapped_column(
        ForeignKey("nutrient.id"), nullable=False, index=True
    )
    treating_type_id: Mapped[int] = mapped_column(
        ForeignKey("treating_type.id"), nullable=False, index=True
    )
    quality: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    product: Mapped["Product"] = relationship(back_populates="product_nutrients")
    nutrient: Mapped["Nutrient"] = relationship(back_populates="product_nutrients")
    treating_type: Mapped["TreatingType"] = relationship(back_populates="product_nutrients")

    __table_args__ = (
        CheckConstraint("quality >= 0", name="ck_product_nutrient_quality_non_negative"),
        Index("ix_product_nutrient_product_nutrient", "product_id", "nutrient_id"),
    )
