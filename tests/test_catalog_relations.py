import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from labkit.catalog_relations import (
    Product,
    ProductNotFound,
    add_category,
    add_product,
    add_serial_number,
    categories_with_products,
    main,
    open_database,
    products_with_details,
    soft_delete_product,
)


@pytest.fixture
def session():
    engine = open_database("sqlite://")
    with Session(engine) as db_session:
        yield db_session
    engine.dispose()


def test_product_loads_category_and_serial(session):
    category = add_category(session, "Eletrônicos")
    product = add_product(session, "Mouse", 1889.90, category.id)
    add_serial_number(session, "123456", product.id)

    [loaded] = products_with_details(session)
    assert loaded.name == "Mouse"
    assert loaded.price == 1889.90
    assert loaded.category.name == "Eletrônicos"
    assert loaded.serial_number.number == "123456"


def test_product_without_category_or_serial(session):
    add_product(session, "Panela", 100.90)
    [loaded] = products_with_details(session)
    assert loaded.category is None
    assert loaded.serial_number is None


def test_categories_group_their_products(session):
    kitchen = add_category(session, "Cozinha")
    tech = add_category(session, "Eletrônicos")
    add_product(session, "Panela", 100.90, kitchen.id)
    add_product(session, "Mouse", 50.0, tech.id)
    add_product(session, "Teclado", 70.0, tech.id)

    result = {c.name: [p.name for p in c.products] for c in categories_with_products(session)}
    assert result == {"Cozinha": ["Panela"], "Eletrônicos": ["Mouse", "Teclado"]}


def test_categories_include_serial_numbers(session):
    kitchen = add_category(session, "Cozinha")
    product = add_product(session, "Panela", 100.90, kitchen.id)
    add_serial_number(session, "000000", product.id)
    [category] = categories_with_products(session)
    assert category.products[0].serial_number.number == "000000"


def test_soft_delete_hides_product_but_keeps_row(session):
    category = add_category(session, "Cozinha")
    keep = add_product(session, "Panela", 100.90, category.id)
    gone = add_product(session, "Mouse", 10.0, category.id)

    removed = soft_delete_product(session, gone.id)
    assert removed.deleted_at is not None
    assert [p.id for p in products_with_details(session)] == [keep.id]
    [loaded_category] = categories_with_products(session)
    assert [p.id for p in loaded_category.products] == [keep.id]

    row = session.scalars(select(Product).where(Product.id == gone.id)).one()
    assert row.deleted_at is not None


def test_soft_delete_twice_raises(session):
    product = add_product(session, "Mouse", 10.0)
    soft_delete_product(session, product.id)
    with pytest.raises(ProductNotFound):
        soft_delete_product(session, product.id)


def test_soft_delete_missing_raises_lookup_error(session):
    with pytest.raises(LookupError):
        soft_delete_product(session, 42)


def test_main_prints_catalog(tmp_path, capsys):
    url = f"sqlite:///{tmp_path / 'catalog.db'}"
    assert main(["--database", url]) == 0
    out = capsys.readouterr().out
    assert "Mouse Eletrônicos 123456" in out
    assert "Eletrônicos :" in out
    assert "- Mouse Serial Number: 123456" in out
    assert "Deleted: Mouse" in out