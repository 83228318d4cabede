"""
Storage Module

Key-value persistence backends the entity stores write their
collections to.
"""

from mise.storage.backends import FileBackend, InMemoryBackend, KeyValueBackend, validate_key

__all__ = ['KeyValueBackend', 'InMemoryBackend', 'FileBackend', 'validate_key']
