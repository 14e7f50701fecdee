"""
Catalog Models: ProductCategory, ProductSubCategory, Product.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TitledMixin

if TYPE_CHECKING:
    from .nutrition import ProductNutrient


class ProductCategory(TitledMixin, Base):
    """Top level of the product hierarchy."""

    __tablename__ = "product_category"

    # Children are removed explicitly; the database rejects deleting a parent in use
    product_sub_categories: Mapped[list["ProductSubCategory"]] = relationship(
        back_populates="product_category",
        passive_deletes=True,
    )


class ProductSubCategory(TitledMixin, Base):
    """Subcategory within a product category."""

    __tablename__ = "product_sub_category"

    product_category_id: Mapped[int] = mapped_column(
        ForeignKey("product_category.id"), nullable=False, index=True
    )

    product_category: Mapped["ProductCategory"] = relationship(
        back_populates="product_sub_categories"
    )
    products: Mapped[list["Product"]] = relationship(
        back_populates="product_sub_category",
        passive_deletes=True,
    )


class Product(TitledMixin, Base):
    """Product belonging to a subcategory."""

    __tablename__ = "product"

    product_sub_category_id: Mapped[int] = mapped_column(
        ForeignKey("product_sub_category.id"), nullable=False, index=True
    )

    product_sub_category: Mapped["ProductSubCategory"] = relationship(
        back_populates="products"
    )
    product_nutrients: Mapped[list["ProductNutrient"]] = relationship(
        back_populates="product",
        passive_deletes=True,
    )
