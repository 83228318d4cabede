"""
Entity Store Module

This module manages the per-entity-type record collections: loading with
first-run seed data, add/update/remove, whole-collection persistence and
observer notification.
"""

from mise.entity_store.store import EntityStore, deserialize_collection, serialize_collection
from mise.entity_store.registry import ENTITY_CONFIGS, ENTITY_REGISTRY, EntityConfig, get_entity_config

# Expose key classes at the module level
__all__ = [
    'EntityStore',
    'EntityConfig',
    'ENTITY_CONFIGS',
    'ENTITY_REGISTRY',
    'get_entity_config',
    'serialize_collection',
    'deserialize_collection',
]
