from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..common.logger import get_logger
from ..core.constants import DEFAULT_STORAGE_KEY
from ..core.exceptions import StorageCorruptionError
from ..records import codec
from ..records.aggregate import HRData
from .repository import KeyValueStorage
from .seed import build_seed_data

logger = get_logger("storage")


@dataclass(frozen=True)
class LoadResult:
    data: HRData
    # Set when stored data was unreadable and the seed dataset was substituted.
    warning: Optional[StorageCorruptionError] = None


class HRDataRepository:
    """Reads and writes the whole aggregate under a single storage key."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        today: Callable[[], date] = date.today,
    ):
        self._storage = storage
        self._key = key
        self._today = today

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> LoadResult:
        raw = self._storage.get(self._key)
        if raw is None:
            data = build_seed_data(self._today())
            self.save(data)
            logger.info("No stored data under %r; initialized seed dataset", self._key)
            return LoadResult(data=data)

        try:
            return LoadResult(data=codec.loads(raw))
        except StorageCorruptionError as e:
            # The unreadable value is left in place until the next successful write.
            logger.warning("Falling back to seed dataset for %r: %s", self._key, e)
            return LoadResult(data=build_seed_data(self._today()), warning=e)

    def save(self, data: HRData) -> None:
        self._storage.set(self._key, codec.dumps(data))
