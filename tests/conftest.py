import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from tests.fakes import CountingSource
from tests.models import Base, Item, records_table


@pytest.fixture
def letters():
    return ["A", "B", "C", "D", "E"]


@pytest.fixture
def source(letters):
    return CountingSource(letters)


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    with Session(engine) as s:
        s.execute(insert(records_table), [{"id": i, "name": f"r{i}"} for i in range(1, 8)])
        s.add_all([Item(id=i, title=f"item-{i}") for i in range(1, 5)])
        s.commit()
        yield s

    engine.dispose()
