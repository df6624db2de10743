"""Storage adapters for Care-Campus-Registry.

This module contains registry adapters that implement the RegistryPort
interface.
"""

from src.adapters.storage.memory_registry import InMemoryRegistry

__all__ = ["InMemoryRegistry"]
