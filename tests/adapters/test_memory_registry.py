"""Unit tests for InMemoryRegistry."""

import threading

import pytest

from src.adapters.storage import InMemoryRegistry
from src.domain.ports import RecordValidationError, RegistryError, RegistryPort


class TestInMemoryRegistry:
    """Test suite for InMemoryRegistry."""

    def test_implements_port(self):
        assert isinstance(InMemoryRegistry(), RegistryPort)

    def test_put_and_get(self):
        registry = InMemoryRegistry("patients")
        assert registry.put("P001", "first") is None
        assert registry.get("P001") == "first"
        assert registry.contains("P001")
        assert "P001" in registry
        assert len(registry) == 1

    def test_last_write_wins(self):
        registry = InMemoryRegistry("patients")
        registry.put("P001", "first")

        previous = registry.put("P001", "second")

        assert previous == "first"
        assert registry.get("P001") == "second"
        assert len(registry) == 1

    def test_missing_id(self):
        registry = InMemoryRegistry()
        assert registry.get("P404") is None
        assert not registry.contains("P404")
        assert "P404" not in registry
        assert 404 not in registry

    def test_ids_snapshot_in_insertion_order(self):
        registry = InMemoryRegistry()
        for record_id in ("B", "A", "C"):
            registry.put(record_id, record_id.lower())

        ids = registry.ids()
        ids.append("Z")

        assert registry.ids() == ["B", "A", "C"]
        assert list(registry) == ["B", "A", "C"]

    def test_empty_identifier_rejected(self):
        registry = InMemoryRegistry("students")
        with pytest.raises(RecordValidationError) as exc_info:
            registry.put("", "nobody")

        assert isinstance(exc_info.value, RegistryError)
        assert "students" in str(exc_info.value)
        assert len(registry) == 0

    def test_concurrent_puts(self):
        """Every insert is visible once all writers finish."""
        registry = InMemoryRegistry()

        def writer(offset: int) -> None:
            for i in range(200):
                registry.put(f"ID{offset}-{i}", i)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 800
        assert registry.get("ID3-199") == 199

    def test_repr(self):
        registry = InMemoryRegistry("patients")
        registry.put("P001", object())
        assert repr(registry) == "InMemoryRegistry(name='patients', size=1)"
