"""Tests for store lifecycle helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from wheel_fitter.domain.errors import StoreError
from wheel_fitter.infra.db import session as session_module
from wheel_fitter.infra.db.session import (
    StoreUnavailableError,
    dispose_store,
    get_engine,
    init_store,
    store_errors,
)


@pytest.fixture(autouse=True)
def reset_engine():
    session_module._engine = None
    session_module._session_local = None
    yield
    session_module._engine = None
    session_module._session_local = None


def test_get_engine_requires_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        get_engine()


def test_init_store_without_database_url_is_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(StoreUnavailableError, match="DATABASE_URL"):
        init_store()


def test_init_store_pings_the_store() -> None:
    engine = MagicMock()
    connection = engine.connect.return_value.__enter__.return_value

    with patch.object(session_module, "get_engine", return_value=engine):
        assert init_store() is engine

    connection.execute.assert_called_once()
    assert str(connection.execute.call_args.args[0]) == "SELECT 1"


def test_init_store_connection_failure_is_unavailable() -> None:
    engine = MagicMock()
    engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("could not connect"))

    with patch.object(session_module, "get_engine", return_value=engine):
        with pytest.raises(StoreUnavailableError, match="could not connect"):
            init_store()


def test_dispose_store_releases_engine() -> None:
    engine = MagicMock()
    session_module._engine = engine

    dispose_store()

    engine.dispose.assert_called_once()
    assert session_module._engine is None


def test_dispose_store_without_engine_is_noop() -> None:
    dispose_store()

    assert session_module._engine is None


def test_store_errors_translates_sqlalchemy_errors() -> None:
    with pytest.raises(StoreError) as exc_info:
        with store_errors("loading car"):
            raise OperationalError("SELECT", {}, Exception("reset by peer"))

    assert exc_info.value.context == {"operation": "loading car"}
    assert "reset by peer" in exc_info.value.message


def test_store_errors_leaves_other_errors_alone() -> None:
    with pytest.raises(KeyError):
        with store_errors("loading car"):
            raise KeyError("x")
