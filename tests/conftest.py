"""Pytest configuration and fixtures for lookupsql tests."""

import sqlite3

import pytest
from dotenv import load_dotenv

from lookupsql import QuerySet
from lookupsql.dialects import MySQLDialect, SQLiteDialect
from lookupsql.querydsl import FilterCompiler

# Load environment variables
load_dotenv()


@pytest.fixture
def mysql():
    return MySQLDialect()


@pytest.fixture
def sqlite():
    return SQLiteDialect()


@pytest.fixture
def compiler(mysql):
    """Filter compiler for the MySQL dialect."""
    return FilterCompiler(mysql)


@pytest.fixture
def qs():
    """Fresh MySQL QuerySet."""
    return QuerySet("mysql")


@pytest.fixture(scope="session")
def people_rows():
    """Rows seeded into the in-memory reference database."""
    return [
        (1, "alice", 34, "A", 0, 12.5, "2024-01-03"),
        (2, "bob", 17, "B", 0, 25.0, "2024-02-11"),
        (3, "carol", 52, "C", 1, 18.0, "2023-12-30"),
        (4, "dave", 18, "A", 0, 9.99, "2024-03-01"),
        (5, "erin", 29, "D", 1, 20.0, "2024-01-20"),
        (6, "frank", 41, "B", 0, 30.0, "2023-11-05"),
        (7, "Alfred", 63, "A", 0, 15.0, "2024-04-12"),
    ]


@pytest.fixture
def people_db(people_rows):
    """In-memory SQLite database with a `people` table."""
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE people (id INTEGER PRIMARY KEY, name TEXT, age INTEGER, status TEXT,"
        " deleted INTEGER, price REAL, created_at TEXT)"
    )
    conn.executemany("INSERT INTO people VALUES (?, ?, ?, ?, ?, ?, ?)", people_rows)
    conn.commit()
    yield conn
    conn.close()
