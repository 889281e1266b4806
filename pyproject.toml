[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "labkit"
version = "0.1.0"
description = "Small database and service programs: a currency quote client and server, product catalogs, and a todo use case"
requires-python = ">=3.10"
dependencies = [
    "sqlalchemy>=2.0",
]
keywords = ["sqlite", "sqlalchemy", "orm", "catalog", "quotes", "todo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
labkit-quote-server = "labkit.quote_server:main"
labkit-quote-client = "labkit.quote_client:main"
labkit-products = "labkit.products:main"
labkit-catalog-relations = "labkit.catalog_relations:main"
labkit-catalog-tags = "labkit.catalog_tags:main"

[tool.setuptools]
packages = ["labkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
