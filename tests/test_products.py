import sqlite3
import uuid

import pytest

from labkit.products import (
    Product,
    ProductNotFound,
    create_table,
    delete_product,
    insert_product,
    main,
    new_product,
    select_all_products,
    select_one_product,
    update_product,
)


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    create_table(connection)
    yield connection
    connection.close()


def test_new_product_has_random_uuid():
    first = new_product("Notebook", 1889.90)
    second = new_product("Notebook", 1889.90)
    assert uuid.UUID(first.id).version == 4
    assert first.id != second.id
    assert (first.name, first.price) == ("Notebook", 1889.90)


def test_insert_then_select_one_round_trip(conn):
    product = new_product("Notebook", 1889.90)
    insert_product(conn, product)
    assert select_one_product(conn, product.id) == product


def test_update_changes_price(conn):
    product = new_product("Notebook", 1889.90)
    insert_product(conn, product)
    product.price = 100.0
    product.name = "Laptop"
    update_product(conn, product)
    loaded = select_one_product(conn, product.id)
    assert loaded.price == 100.0
    assert loaded.name == "Laptop"


def test_select_all_returns_every_product(conn):
    products = [new_product("Notebook", 10.0), new_product("Tablet", 20.0)]
    for product in products:
        insert_product(conn, product)
    loaded = select_all_products(conn)
    assert sorted(loaded, key=lambda p: p.name) == sorted(products, key=lambda p: p.name)


def test_select_all_on_empty_table(conn):
    assert select_all_products(conn) == []


def test_delete_removes_row(conn):
    keep = new_product("Tablet", 5.0)
    gone = new_product("Notebook", 1889.90)
    insert_product(conn, keep)
    insert_product(conn, gone)
    delete_product(conn, gone.id)
    assert select_all_products(conn) == [keep]
    with pytest.raises(ProductNotFound):
        select_one_product(conn, gone.id)


def test_select_one_missing_raises_lookup_error(conn):
    with pytest.raises(LookupError):
        select_one_product(conn, str(uuid.uuid4()))


def test_duplicate_insert_fails(conn):
    product = Product(name="Notebook", price=1.0, id="fixed-id")
    insert_product(conn, product)
    with pytest.raises(sqlite3.IntegrityError):
        insert_product(conn, product)


def test_main_prints_updated_price_and_cleans_up(tmp_path, capsys):
    db = tmp_path / "products.db"
    assert main(["--database", str(db)]) == 0
    out = capsys.readouterr().out
    assert "Product: Notebook, possui o preço de 100.00" in out
    connection = sqlite3.connect(db)
    try:
        assert select_all_products(connection) == []
    finally:
        connection.close()