"""Tests for local ledger stores and store selection."""

from decimal import Decimal

import pytest

from splitledger.config import Settings
from splitledger.domain.ledger import LedgerService
from splitledger.storage.base import MemoryStore
from splitledger.storage.factories import create_sqlite_store, create_store
from splitledger.storage.json_file import JsonFileStore
from splitledger.storage.remote import FallbackStore
from splitledger.storage.sqlalchemy_store import SQLAlchemyStore


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_load_returns_copy(self, sample_expenses):
        """Test loaded lists are independent of the stored snapshot."""
        store = MemoryStore(sample_expenses)

        loaded = store.load()
        loaded.clear()

        assert store.load() == sample_expenses

    def test_save_counts(self, sample_expenses):
        """Test each save replaces the snapshot and is counted."""
        store = MemoryStore()

        assert store.save(sample_expenses) is True
        assert store.save(sample_expenses[:1]) is True

        assert store.expenses == sample_expenses[:1]
        assert store.save_count == 2


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    def test_missing_file_loads_empty(self, data_path):
        """Test a ledger that was never saved is empty."""
        assert JsonFileStore(data_path).load() == []

    def test_round_trip(self, data_path, sample_expenses):
        """Test saved expenses load back unchanged and in order."""
        store = JsonFileStore(data_path)

        assert store.save(sample_expenses) is True
        assert JsonFileStore(data_path).load() == sample_expenses

    @pytest.mark.parametrize("amount", ["12345678901234.567", "10.1234567", "0.000001", "850.50"])
    def test_round_trip_keeps_every_digit(self, data_path, make_expense, amount):
        """Test amounts a float cannot hold exactly load back unchanged."""
        store = JsonFileStore(data_path)
        store.save([make_expense(amount=amount)])

        assert JsonFileStore(data_path).load()[0].amount == Decimal(amount)

    def test_creates_parent_directories(self, tmp_path, sample_expenses):
        """Test saving into a directory that does not exist yet."""
        path = tmp_path / "nested" / "dir" / "ledger.json"

        assert JsonFileStore(path).save(sample_expenses) is True
        assert path.exists()

    def test_no_temp_files_left(self, data_path, sample_expenses):
        """Test the atomic write cleans up after itself."""
        JsonFileStore(data_path).save(sample_expenses)

        assert [p.name for p in data_path.parent.iterdir()] == ["ledger.json"]

    def test_corrupt_file_loads_empty(self, data_path):
        """Test an unreadable file is treated as an empty ledger."""
        data_path.write_text("{not json", encoding="utf-8")

        assert JsonFileStore(data_path).load() == []

    def test_invalid_records_load_empty(self, data_path):
        """Test a file with invalid records is treated as an empty ledger."""
        data_path.write_text('[{"id": "x"}]', encoding="utf-8")

        assert JsonFileStore(data_path).load() == []

    def test_unwritable_path_returns_false(self, tmp_path, sample_expenses):
        """Test a failed write reports False instead of raising."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        assert JsonFileStore(blocker / "ledger.json").save(sample_expenses) is False

    def test_ledger_survives_restart(self, data_path):
        """Test a new ledger over the same file sees earlier mutations."""
        first = LedgerService(JsonFileStore(data_path))
        expense = first.add("Groceries", "120.75", "thejas")

        second = LedgerService(JsonFileStore(data_path))

        assert second.all() == (expense,)

    def test_describe(self, data_path):
        """Test describe names the file."""
        assert JsonFileStore(data_path).describe() == str(data_path)


class TestSQLAlchemyStore:
    """Tests for SQLAlchemyStore over SQLite."""

    @pytest.fixture
    def store(self, tmp_path):
        store = create_sqlite_store(str(tmp_path / "ledger.db"))
        yield store
        store.disconnect()

    def test_empty(self, store):
        """Test a fresh database loads empty."""
        assert isinstance(store, SQLAlchemyStore)
        assert store.load() == []

    def test_round_trip(self, store, sample_expenses):
        """Test saved expenses load back unchanged and in order."""
        assert store.save(sample_expenses) is True

        assert store.load() == sample_expenses

    def test_save_replaces_snapshot(self, store, sample_expenses):
        """Test a second save replaces, not appends."""
        store.save(sample_expenses)
        store.save(sample_expenses[1:3])

        assert store.load() == sample_expenses[1:3]

    @pytest.mark.parametrize("amount", ["12345678901234.567", "10.1234567", "0.000001", "850.50"])
    def test_round_trip_keeps_every_digit(self, store, make_expense, amount):
        """Test high-precision amounts are not rounded by the database."""
        store.save([make_expense(amount=amount)])

        assert store.load()[0].amount == Decimal(amount)

    def test_reordered_save(self, store, sample_expenses):
        """Test stored order follows the latest snapshot."""
        store.save(sample_expenses)
        reordered = list(reversed(sample_expenses))

        store.save(reordered)

        assert [e.id for e in store.load()] == [e.id for e in reordered]

    def test_persists_across_connections(self, tmp_path, sample_expenses):
        """Test data is visible to a new store over the same file."""
        path = str(tmp_path / "ledger.db")
        first = create_sqlite_store(path)
        first.save(sample_expenses)
        first.disconnect()

        second = create_sqlite_store(path)
        try:
            assert second.load() == sample_expenses
        finally:
            second.disconnect()

    def test_timestamps_keep_utc(self, store, sample_expenses):
        """Test timestamps come back timezone-aware."""
        store.save(sample_expenses)

        assert all(e.timestamp.tzinfo is not None for e in store.load())

    def test_with_ledger(self, store):
        """Test the ledger service runs on the SQL store."""
        ledger = LedgerService(store)
        expense = ledger.add("Electricity bill", "1450.25", "sharath")
        ledger.edit(expense.id, amount="1500")

        reloaded = LedgerService(store)

        assert [e.amount for e in reloaded.all()] == [Decimal("1500")]


class TestCreateStore:
    """Tests for store selection from settings."""

    def test_json_default(self, data_path):
        """Test the JSON backend is the default."""
        store = create_store(Settings(data_path=data_path))

        assert isinstance(store, JsonFileStore)
        assert store.path == data_path

    def test_sqlite(self, tmp_path):
        """Test selecting the SQLite backend."""
        store = create_store(Settings(backend="sqlite", data_path=tmp_path / "db" / "ledger.db"))
        try:
            assert isinstance(store, SQLAlchemyStore)
            assert store.database_url.endswith("ledger.db")
        finally:
            store.disconnect()

    def test_remote(self, data_path):
        """Test the remote backend mirrors into a local JSON file."""
        store = create_store(
            Settings(backend="remote", data_path=data_path, remote_url="https://proxy.example/exec")
        )

        assert isinstance(store, FallbackStore)
        assert store.remote.url == "https://proxy.example/exec"
        assert isinstance(store.local, JsonFileStore)

    def test_remote_requires_url(self, data_path):
        """Test the remote backend without a URL is a configuration error."""
        with pytest.raises(ValueError, match="requires a URL"):
            create_store(Settings(backend="remote", data_path=data_path))

    def test_reads_environment(self, monkeypatch, data_path):
        """Test settings default to SPLITLEDGER_* variables."""
        monkeypatch.setenv("SPLITLEDGER_BACKEND", "json")
        monkeypatch.setenv("SPLITLEDGER_DATA_PATH", str(data_path))

        store = create_store()

        assert isinstance(store, JsonFileStore)
        assert store.path == data_path
