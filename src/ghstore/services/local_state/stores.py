"""Local state stores: installed apps, favourites and starred repositories.

The enrichment pipeline only depends on the protocols below. The in-memory
store backs tests and embedding applications; the JSON file store persists
the same state under the data directory.
"""

import asyncio
import json
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError as DocumentValidationError

from ghstore.exceptions import OperationalError
from ghstore.logger import get_logger
from ghstore.models.local_state import FavouriteRepo, InstalledApp, LocalStateDocument, StarredRepo

logger = get_logger(__name__)


class InstalledAppsStore(Protocol):
    async def get_app_by_repository_id(self, repo_id: int) -> InstalledApp | None: ...

    async def list_installed_repository_ids(self) -> set[int]: ...

    async def upsert_app(self, app: InstalledApp) -> None: ...

    async def remove_app(self, repo_id: int) -> None: ...


class FavouritesStore(Protocol):
    async def list_all(self) -> list[FavouriteRepo]: ...

    async def add_favourite(self, favourite: FavouriteRepo) -> None: ...

    async def remove_favourite(self, repo_id: int) -> None: ...


class StarredStore(Protocol):
    async def list_starred(self) -> list[StarredRepo]: ...

    async def add_starred(self, starred: StarredRepo) -> None: ...

    async def remove_starred(self, repo_id: int) -> None: ...


class InMemoryLocalStateStore:
    """Installed apps, favourites and starred repositories held in memory.

    Reads return copies, so a caller holding a result never sees later writes.
    A write becomes visible only after ``_persist`` accepts it; a failed write
    leaves the previous state in place.
    """

    def __init__(self, document: LocalStateDocument | None = None) -> None:
        document = document or LocalStateDocument()
        self._installed: dict[int, InstalledApp] = {app.repo_id: app for app in document.installed}
        self._favourites: dict[int, FavouriteRepo] = {fav.repo_id: fav for fav in document.favourites}
        self._starred: dict[int, StarredRepo] = {star.repo_id: star for star in document.starred}
        self._lock = asyncio.Lock()

    def to_document(self) -> LocalStateDocument:
        return LocalStateDocument(
            installed=list(self._installed.values()),
            favourites=list(self._favourites.values()),
            starred=list(self._starred.values()),
        )

    async def _persist(self, document: LocalStateDocument) -> None:
        """Hook called under the write lock with the state about to become current."""

    async def _commit(
        self,
        installed: dict[int, InstalledApp] | None = None,
        favourites: dict[int, FavouriteRepo] | None = None,
        starred: dict[int, StarredRepo] | None = None,
    ) -> None:
        installed = self._installed if installed is None else installed
        favourites = self._favourites if favourites is None else favourites
        starred = self._starred if starred is None else starred

        await self._persist(
            LocalStateDocument(
                installed=list(installed.values()),
                favourites=list(favourites.values()),
                starred=list(starred.values()),
            )
        )
        self._installed, self._favourites, self._starred = installed, favourites, starred

    # Installed apps

    async def get_app_by_repository_id(self, repo_id: int) -> InstalledApp | None:
        return self._installed.get(repo_id)

    async def list_installed_repository_ids(self) -> set[int]:
        return set(self._installed)

    async def upsert_app(self, app: InstalledApp) -> None:
        async with self._lock:
            await self._commit(installed={**self._installed, app.repo_id: app})

    async def remove_app(self, repo_id: int) -> None:
        async with self._lock:
            if repo_id in self._installed:
                await self._commit(installed={k: v for k, v in self._installed.items() if k != repo_id})

    # Favourites

    async def list_all(self) -> list[FavouriteRepo]:
        return list(self._favourites.values())

    async def add_favourite(self, favourite: FavouriteRepo) -> None:
        async with self._lock:
            await self._commit(favourites={**self._favourites, favourite.repo_id: favourite})

    async def remove_favourite(self, repo_id: int) -> None:
        async with self._lock:
            if repo_id in self._favourites:
                await self._commit(favourites={k: v for k, v in self._favourites.items() if k != repo_id})

    # Starred

    async def list_starred(self) -> list[StarredRepo]:
        return list(self._starred.values())

    async def add_starred(self, starred: StarredRepo) -> None:
        async with self._lock:
            await self._commit(starred={**self._starred, starred.repo_id: starred})

    async def remove_starred(self, repo_id: int) -> None:
        async with self._lock:
            if repo_id in self._starred:
                await self._commit(starred={k: v for k, v in self._starred.items() if k != repo_id})


class JsonFileLocalStateStore(InMemoryLocalStateStore):
    """Local state persisted to a JSON file after every change."""

    def __init__(self, path: Path) -> None:
        """
        Load local state from a JSON file.

        Args:
            path: State file; a missing file means empty state

        Raises:
            OperationalError: If the file exists but cannot be parsed
        """
        self.path = path
        super().__init__(self._read(path))

    @staticmethod
    def _read(path: Path) -> LocalStateDocument:
        if not path.exists():
            return LocalStateDocument()
        try:
            with open(path, encoding="utf-8") as f:
                return LocalStateDocument.model_validate(json.load(f))
        except (OSError, ValueError, DocumentValidationError) as e:
            raise OperationalError("local_state.corrupt", path=str(path), error=str(e)) from e

    def _write(self, document: LocalStateDocument) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
        tmp_path.replace(self.path)

    async def _persist(self, document: LocalStateDocument) -> None:
        try:
            await asyncio.to_thread(self._write, document)
        except OSError as e:
            raise OperationalError("local_state.write_failed", path=str(self.path), error=str(e)) from e
        logger.debug("Local state saved", path=str(self.path))
