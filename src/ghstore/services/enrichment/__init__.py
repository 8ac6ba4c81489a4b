"""Enrichment services."""

from .merger import LocalStateMerger
from .scheduler import DEFAULT_CONCURRENCY_LIMIT, EnrichmentScheduler

__all__ = ["DEFAULT_CONCURRENCY_LIMIT", "EnrichmentScheduler", "LocalStateMerger"]
