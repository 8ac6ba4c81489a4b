"""Bounded-concurrency fan-out of release checks."""

import asyncio
from collections.abc import Sequence
from typing import Protocol

from ghstore.exceptions import ValidationError
from ghstore.logger import get_logger
from ghstore.models.repository import EnrichedRepository, LocalStateSets, ReleaseFacts, RepositorySummary
from ghstore.services.enrichment.merger import LocalStateMerger

logger = get_logger(__name__)

DEFAULT_CONCURRENCY_LIMIT = 20


class Inspector(Protocol):
    async def inspect(self, owner: str, repo_name: str) -> ReleaseFacts: ...


class EnrichmentScheduler:
    """Runs one release check per repository with at most ``concurrency_limit`` in flight."""

    def __init__(
        self,
        inspector: Inspector,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            inspector: Release inspector; must not raise for ordinary failures
            concurrency_limit: Maximum simultaneous release checks

        Raises:
            ValidationError: If concurrency_limit is below 1
        """
        if concurrency_limit < 1:
            raise ValidationError("enrichment.invalid_concurrency_limit", limit=concurrency_limit)
        self.inspector = inspector
        self.concurrency_limit = concurrency_limit

    async def enrich(
        self,
        items: Sequence[RepositorySummary],
        snapshot: LocalStateSets,
    ) -> list[EnrichedRepository]:
        """
        Enrich every repository with release facts and local state flags.

        The output has one entry per input item, in input order. If this
        coroutine is cancelled, or a unit fails unexpectedly, all outstanding
        units are cancelled and awaited before the exception propagates.

        Args:
            items: Repositories to enrich
            snapshot: Local state shared by every item of this batch

        Returns:
            Enriched repositories in input order
        """
        if not items:
            return []

        # Asyncio semaphores wake waiters in FIFO order
        permits = asyncio.Semaphore(self.concurrency_limit)

        async def enrich_one(repo: RepositorySummary) -> EnrichedRepository:
            async with permits:
                facts = await self.inspector.inspect(repo.owner, repo.name)
            return LocalStateMerger.combine(repo, facts, snapshot)

        logger.info("Enriching repositories", count=len(items), concurrency_limit=self.concurrency_limit)

        tasks = [asyncio.create_task(enrich_one(repo), name=f"release-check:{repo.full_name}") for repo in items]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        logger.info(
            "Enrichment complete",
            count=len(results),
            installable=sum(1 for r in results if r.release_facts.has_installable_assets),
        )
        return list(results)
