"""
Sidetrack clipping.

Elements of a wellbore that continues into a sidetrack are kept only down
to the sidetrack's kickoff depth: anything starting below it belongs to
the sidetrack, anything crossing it is cut at it.
"""
from __future__ import annotations

import functools
import logging
from typing import Callable, Optional, TypeVar

from django.db import DatabaseError

from apps.well_core.services.wellbore_path import WellborePathNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def kickoff_md(next_node: Optional[WellborePathNode]) -> Optional[float]:
    if next_node is None:
        return None
    return next_node.kickoff_md


def kickoff_tvd(next_node: Optional[WellborePathNode]) -> Optional[float]:
    if next_node is None:
        return None
    return next_node.kickoff_tvd


def clamp(value: Optional[float], limit: Optional[float]) -> Optional[float]:
    """``min(value, limit)`` where either side may be missing."""
    if limit is None or value is None:
        return value
    return min(value, limit)


def isolated(default_factory: Callable[[], T]):
    """
    Run a sub-fetch so a database error degrades to an empty result
    instead of failing the whole schematic.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DatabaseError:
                logger.exception(f"{func.__name__} failed; continuing with an empty result")
                return default_factory()
        return wrapper
    return decorator
