"""Utility functions package."""

from jobly.utils.slug import create_slug
from jobly.utils.sql import SqlFragment, build_filtered_query, sql_for_partial_update

__all__ = ["create_slug", "SqlFragment", "build_filtered_query", "sql_for_partial_update"]
