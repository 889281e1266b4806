"""Products and categories linked many-to-many, with locked updates."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from datetime import datetime

from sqlalchemy import Column, ForeignKey, Table, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    relationship,
    selectinload,
)

DB_URL = "sqlite:///goexpert.db"


class CategoryNotFound(LookupError):
    """Raised when no category has the requested id."""


class Base(DeclarativeBase):
    """Declarative base for the tagged catalog tables."""


products_categories = Table(
    "products_categories",
    Base.metadata,
    Column("product_id", ForeignKey("products.id"), primary_key=True),
    Column("category_id", ForeignKey("categories.id"), primary_key=True),
)


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]
    products: Mapped[list[Product]] = relationship(
        secondary=products_categories, back_populates="categories", order_by="Product.id"
    )


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]
    price: Mapped[float]
    categories: Mapped[list[Category]] = relationship(
        secondary=products_categories, back_populates="products", order_by="Category.id"
    )
    created_at: Mapped[datetime] = mapped_column(default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.now, onupdate=datetime.now)
    deleted_at: Mapped[datetime | None] = mapped_column(default=None, index=True)


def open_database(url: str = DB_URL) -> Engine:
    """Connect to ``url`` and create any missing tables."""
    engine = create_engine(url)
    Base.metadata.create_all(engine)
    return engine


def add_category(session: Session, name: str) -> Category:
    """Create and commit a category."""
    category = Category(name=name)
    session.add(category)
    session.commit()
    return category


def add_product(
    session: Session, name: str, price: float, categories: Iterable[Category] = ()
) -> Product:
    """Create and commit a product tagged with ``categories``."""
    product = Product(name=name, price=price, categories=list(categories))
    session.add(product)
    session.commit()
    return product


def categories_with_products(session: Session) -> list[Category]:
    """Categories with their live products loaded."""
    query = (
        select(Category)
        .options(selectinload(Category.products.and_(Product.deleted_at.is_(None))))
        .order_by(Category.id)
        .execution_options(populate_existing=True)
    )
    return list(session.scalars(query))


def rename_category_locked(session: Session, category_id: int, name: str) -> Category:
    """Rename a category inside one transaction, holding a row lock while doing so."""
    try:
        category = session.scalars(
            select(Category).where(Category.id == category_id).with_for_update()
        ).first()
        if category is None:
            raise CategoryNotFound(category_id)
        category.name = name
    except Exception:
        session.rollback()
        raise
    session.commit()
    return category


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise tagged catalog.")
    parser.add_argument("--database", default=DB_URL)
    args = parser.parse_args(argv)

    engine = open_database(args.database)
    try:
        with Session(engine) as session:
            kitchen = add_category(session, "Cozinha")
            tech = add_category(session, "Eletronicos")
            add_product(session, "Geladeira", 1889.90, [kitchen, tech])

            for category in categories_with_products(session):
                print(category.name, ":")
                for product in category.products:
                    print("-", product.name)

            renamed = rename_category_locked(session, tech.id, "Eletrônicos")
            print("Renamed:", renamed.name)
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())