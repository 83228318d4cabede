"""
Mise film production record store.
This package contains the entity stores, per-project views and the
services built on top of them.
"""

# Module exports
__all__ = [
    'storage',
    'entity_store',
    'projects',
    'imports',
    'onboarding',
    'reports',
    'api'
]
