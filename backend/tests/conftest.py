"""Shared fixtures: an isolated SQLite database per test and an API client
wired to it through ``dependency_overrides``."""

import pytest
from fastapi.testclient import TestClient
from fpdf import FPDF
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from expense_tracker.db import get_db, init_db
from expense_tracker.main import app


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'expenses.db'}",
        connect_args={"check_same_thread": False},
    )
    init_db(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_pdf():
    """Build a PDF with one page per list of lines and return its bytes."""

    def _make(*pages):
        pdf = FPDF()
        pdf.set_font("Helvetica", size=10)
        for lines in pages:
            pdf.add_page()
            for line in lines:
                pdf.cell(0, 8, line, new_x="LMARGIN", new_y="NEXT")
        return bytes(pdf.output())

    return _make
