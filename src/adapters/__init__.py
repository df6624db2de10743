"""Adapters layer for Care-Campus-Registry.

Adapters implement Port interfaces defined in the domain layer.
"""
