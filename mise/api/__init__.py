"""
API Module

FastAPI application exposing the entity stores, per-project views,
active project selection and import batches over HTTP.
"""

from mise.api.app import create_app

__all__ = ['create_app']
