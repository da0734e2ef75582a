"""
Pytest configuration and fixtures for ypbank tests

This module provides shared record fixtures for unit and integration tests.
"""
import os

import pytest

from ypbank.core.models import TransactionRecord, TxStatus, TxType


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the filesystem"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run codecs and CLIs against files"
    )


# =======================
# RECORD FIXTURES
# =======================

@pytest.fixture
def deposit_record() -> TransactionRecord:
    return TransactionRecord(
        tx_id=1000000000000000,
        tx_type=TxType.DEPOSIT,
        from_user_id=0,
        to_user_id=9223372036854775807,
        amount=100,
        timestamp=1633036860000,
        status=TxStatus.FAILURE,
        description="Record number 1",
    )


@pytest.fixture
def sample_records(deposit_record) -> list[TransactionRecord]:
    """
    Three records covering every transaction type and status

    Returns:
        List of TransactionRecord
    """
    return [
        deposit_record,
        TransactionRecord(
            tx_id=1000000000000001,
            tx_type=TxType.TRANSFER,
            from_user_id=9223372036854775807,
            to_user_id=9223372036854775807,
            amount=200,
            timestamp=1633036920000,
            status=TxStatus.PENDING,
            description="Record number 2",
        ),
        TransactionRecord(
            tx_id=1000000000000002,
            tx_type=TxType.WITHDRAWAL,
            from_user_id=599094029349995112,
            to_user_id=0,
            amount=18446744073709551615,
            timestamp=1633036980000,
            status=TxStatus.SUCCESS,
            description="Record number 3",
        ),
    ]


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """
    Give each test its own copy of the environment

    Settings loading reads LOG_LEVEL, LOG_FORMAT and YPBANK_OUTPUT_FORMAT and
    python-dotenv writes into os.environ, so neither may leak between tests.
    """
    environ = os.environ.copy()
    for name in ("LOG_LEVEL", "LOG_FORMAT", "YPBANK_OUTPUT_FORMAT"):
        environ.pop(name, None)
    monkeypatch.setattr(os, "environ", environ)
