"""Catalog service: categories and products."""
from __future__ import annotations

import re
import uuid

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from storefront.db.models.catalog import Category, Product
from storefront.schemas.catalog import (
    CategoryCreate,
    CategoryUpdate,
    ProductCreate,
    ProductUpdate,
)
from storefront.services.activity import ActivityService
from storefront.utils.exceptions import BadRequestError, ConflictError, NotFoundError


def slugify(value: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or "category"


class CatalogService:
    def __init__(self, db: Session):
        self.db = db

    # Categories

    def list_categories(self) -> list[Category]:
        return list(self.db.scalars(select(Category).order_by(Category.name)))

    def get_category(self, category_id: int) -> Category:
        category = self.db.get(Category, category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def _ensure_unique_name(self, name: str, exclude_id: int | None = None) -> None:
        stmt = select(Category).where(
            or_(func.lower(Category.name) == name.lower(), Category.slug == slugify(name))
        )
        existing = self.db.scalars(stmt).first()
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("A category with this name already exists")

    def create_category(self, payload: CategoryCreate) -> Category:
        self._ensure_unique_name(payload.name)
        category = Category(
            name=payload.name,
            slug=slugify(payload.name),
            description=payload.description,
            image_url=payload.image_url,
        )
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def update_category(self, category_id: int, payload: CategoryUpdate) -> Category:
        category = self.get_category(category_id)
        data = payload.model_dump(exclude_unset=True)
        if "name" in data and data["name"] is not None:
            self._ensure_unique_name(data["name"], exclude_id=category.id)
            category.slug = slugify(data["name"])
        for field, value in data.items():
            setattr(category, field, value)
        self.db.commit()
        self.db.refresh(category)
        return category

    def delete_category(self, category_id: int) -> None:
        category = self.get_category(category_id)
        for product in category.products:
            product.category_id = None
        self.db.delete(category)
        self.db.commit()

    # Products

    def list_products(
        self,
        *,
        category_id: int | None = None,
        query: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Product], int]:
        """Return a page of active products and the total match count."""

        conditions = [Product.is_active.is_(True)]
        if category_id is not None:
            conditions.append(Product.category_id == category_id)
        if query:
            pattern = f"%{query.lower()}%"
            conditions.append(
                or_(func.lower(Product.name).like(pattern), func.lower(Product.description).like(pattern))
            )

        total = self.db.scalar(select(func.count()).select_from(Product).where(*conditions)) or 0
        stmt = (
            select(Product)
            .where(*conditions)
            .order_by(Product.created_at.desc(), Product.name)
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.scalars(stmt)), total

    def get_product(self, product_id: uuid.UUID, *, include_inactive: bool = False) -> Product:
        product = self.db.get(Product, product_id)
        if product is None or (not product.is_active and not include_inactive):
            raise NotFoundError("Product not found")
        return product

    def _check_category(self, category_id: int | None) -> None:
        if category_id is not None and self.db.get(Category, category_id) is None:
            raise BadRequestError("Unknown category")

    def create_product(self, payload: ProductCreate, created_by: uuid.UUID | None = None) -> Product:
        self._check_category(payload.category_id)
        product = Product(**payload.model_dump())
        self.db.add(product)
        self.db.flush()
        ActivityService(self.db).record(
            "product_created", f"New product: {product.name}", user_id=created_by
        )
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product_id: uuid.UUID, payload: ProductUpdate) -> Product:
        product = self.get_product(product_id, include_inactive=True)
        data = payload.model_dump(exclude_unset=True)
        if "category_id" in data:
            self._check_category(data["category_id"])
        for field, value in data.items():
            setattr(product, field, value)
        self.db.commit()
        self.db.refresh(product)
        return product

    def deactivate_product(self, product_id: uuid.UUID) -> None:
        """Hide a product from the storefront; order history keeps referencing it."""

        product = self.get_product(product_id, include_inactive=True)
        product.is_active = False
        self.db.commit()
