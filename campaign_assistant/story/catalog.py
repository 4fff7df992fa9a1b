"""
Static catalogs for the story subsystems.

Every story generator draws from a handful of fixed catalogs (backgrounds,
flaws, plot hooks, conflict types...). A Catalog keeps the items of one kind
in insertion order, keyed by id, and raises the owning subsystem's error for
unknown ids.
"""

from dataclasses import asdict, dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogItem:
    """Base for catalog entries: an id, a display name and a description."""
    item_id: str
    name: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["id"] = data.pop("item_id")
        return data


T = TypeVar("T", bound=CatalogItem)


class Catalog(Generic[T]):
    """
    Ordered, read-only collection of catalog items.

    Args:
        kind: Human readable item kind used in error messages ("flaw")
        items: Items in display order
        error: Exception class raised by require() for unknown ids
    """

    def __init__(self, kind: str, items: Iterable[T], error: type[Exception] = KeyError):
        self.kind = kind
        self._error = error
        self._items: dict[str, T] = {}
        for item in items:
            self._items[item.item_id] = item
        logger.debug(f"Loaded {len(self._items)} {kind} entries")

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items.values())

    def get(self, item_id: str) -> Optional[T]:
        return self._items.get(item_id)

    def require(self, item_id: str) -> T:
        """Get an item, raising the catalog's error when the id is unknown."""
        item = self._items.get(item_id)
        if item is None:
            raise self._error(f"Unknown {self.kind}: {item_id}")
        return item

    def ids(self) -> list[str]:
        return list(self._items)

    def all(self) -> list[T]:
        return list(self._items.values())

    def pick(self, ids: Iterable[str]) -> list[T]:
        """Items for the given ids, silently dropping unknown ones."""
        return [self._items[i] for i in ids if i in self._items]

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {item_id: item.to_dict() for item_id, item in self._items.items()}
