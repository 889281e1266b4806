"""Products with a category and a serial number, soft-deleted via an ORM."""

from __future__ import annotations

import argparse
from datetime import datetime

from sqlalchemy import ForeignKey, create_engine, select
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


class ProductNotFound(LookupError):
    """Raised when no live product has the requested id."""


class Base(DeclarativeBase):
    """Declarative base for the catalog tables."""


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]
    products: Mapped[list[Product]] = relationship(
        back_populates="category", order_by="Product.id"
    )


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]
    price: Mapped[float]
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"))
    category: Mapped[Category | None] = relationship(back_populates="products")
    serial_number: Mapped[SerialNumber | None] = relationship(back_populates="product")
    created_at: Mapped[datetime] = mapped_column(default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.now, onupdate=datetime.now)
    deleted_at: Mapped[datetime | None] = mapped_column(default=None, index=True)


class SerialNumber(Base):
    __tablename__ = "serial_numbers"

    id: Mapped[int] = mapped_column(primary_key=True)
    number: Mapped[str]
    product_id: Mapped[int | None] = mapped_column(ForeignKey("products.id"))
    product: Mapped[Product | None] = relationship(back_populates="serial_number")


_LIVE = Product.deleted_at.is_(None)


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
    session: Session, name: str, price: float, category_id: int | None = None
) -> Product:
    """Create and commit a product in the given category."""
    product = Product(name=name, price=price, category_id=category_id)
    session.add(product)
    session.commit()
    return product


def add_serial_number(session: Session, number: str, product_id: int) -> SerialNumber:
    """Create and commit a serial number for a product."""
    serial = SerialNumber(number=number, product_id=product_id)
    session.add(serial)
    session.commit()
    return serial


def products_with_details(session: Session) -> list[Product]:
    """Live products with their category and serial number loaded."""
    query = (
        select(Product)
        .where(_LIVE)
        .options(selectinload(Product.category), selectinload(Product.serial_number))
        .order_by(Product.id)
        .execution_options(populate_existing=True)
    )
    return list(session.scalars(query))


def categories_with_products(session: Session) -> list[Category]:
    """Categories with their live products and those products' serial numbers."""
    query = (
        select(Category)
        .options(
            selectinload(Category.products.and_(_LIVE)).selectinload(Product.serial_number)
        )
        .order_by(Category.id)
        .execution_options(populate_existing=True)
    )
    return list(session.scalars(query))


def soft_delete_product(session: Session, product_id: int) -> Product:
    """Mark a live product deleted without removing its row."""
    product = session.scalars(
        select(Product).where(Product.id == product_id, _LIVE)
    ).first()
    if product is None:
        raise ProductNotFound(product_id)
    product.deleted_at = datetime.now()
    session.commit()
    return product


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise catalog relations.")
    parser.add_argument("--database", default=DB_URL)
    args = parser.parse_args(argv)

    engine = open_database(args.database)
    try:
        with Session(engine) as session:
            category = add_category(session, "Eletrônicos")
            product = add_product(session, "Mouse", 1889.90, category.id)
            add_serial_number(session, "123456", product.id)

            for item in products_with_details(session):
                category_name = item.category.name if item.category else ""
                serial = item.serial_number.number if item.serial_number else ""
                print(item.name, category_name, serial)

            for group in categories_with_products(session):
                print(group.name, ":")
                for item in group.products:
                    serial = item.serial_number.number if item.serial_number else ""
                    print("-", item.name, "Serial Number:", serial)

            removed = soft_delete_product(session, product.id)
            print("Deleted:", removed.name)
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())