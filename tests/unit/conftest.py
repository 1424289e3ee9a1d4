import pytest
from unittest.mock import AsyncMock

from src.app.services.unit_of_work import UnitOfWork


@pytest.fixture
def mock_uow():
    """UnitOfWork whose commit/rollback are recorded instead of executed"""

    class RecordingUnitOfWork(UnitOfWork):
        commit = AsyncMock()
        rollback = AsyncMock()

    return RecordingUnitOfWork()


@pytest.fixture
def mock_customer_repo():
    """Create mock customer repository"""
    return AsyncMock()


@pytest.fixture
def mock_account_repo():
    """Create mock account repository"""
    return AsyncMock()


@pytest.fixture
def mock_transaction_repo():
    """Create mock transaction repository"""
    return AsyncMock()


@pytest.fixture
def mock_comission_repo():
    """Create mock comission repository"""
    return AsyncMock()
