import pytest
from fastapi.testclient import TestClient

from ra_board.config import settings
from ra_board.main import app
from ra_board.services.board_store import board_store
from ra_board.services.demo_data import seed_demo_board


@pytest.fixture
def fresh_board_store():
    """Reset the in-memory board to the demo data for each test."""
    board_store.reset()
    seed_demo_board(board_store)
    yield board_store
    board_store.reset()


@pytest.fixture
def client(fresh_board_store):
    original_allow_reopen = settings.allow_reopen
    c = TestClient(app)
    yield c
    settings.allow_reopen = original_allow_reopen
