"""Keyed item store that resolves item ids to item snapshots."""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..grid.models import Item
from ..utils.exceptions import ItemNotFoundError, ItemSourceError

logger = logging.getLogger(__name__)


class ItemStore(Mapping[Any, Item]):
    """Read-only mapping of item id to :class:`Item`, in insertion order.

    The calendar never fetches or caches items itself; it consumes the
    snapshot returned by :meth:`resolve` at assembly time.
    """

    def __init__(self, items: Iterable[Union[Item, Mapping[str, Any]]] = ()) -> None:
        self._items: dict[Any, Item] = {}
        for raw in items:
            item = raw if isinstance(raw, Item) else Item.model_validate(raw)
            if item.id in self._items:
                logger.warning(f"Duplicate item id {item.id!r}, keeping the last definition")
            self._items[item.id] = item

    def __getitem__(self, item_id: Any) -> Item:
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def ids(self) -> list[Any]:
        return list(self._items)

    def resolve(self, item_ids: Iterable[Any]) -> list[Item]:
        """Snapshot of the items for ``item_ids``, in the given order.

        Raises:
            ItemNotFoundError: If an id is unknown
        """
        return [self[item_id] for item_id in item_ids]

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ItemStore":
        """Load items from a YAML or JSON file.

        The document is either a list of item mappings or a mapping with an
        ``items`` list. Keys may use ``dueDate``/``isDueCompleted`` or their
        snake_case forms.

        Raises:
            ItemSourceError: If the file cannot be read or has the wrong shape
        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ItemSourceError(
                "Could not read item file", file_path=str(file_path), original_error=e
            ) from e

        try:
            if file_path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ItemSourceError(
                "Item file is not valid JSON/YAML", file_path=str(file_path), original_error=e
            ) from e

        if isinstance(data, Mapping):
            data = data.get("items", [])
        if data is None:
            data = []
        if not isinstance(data, list) or not all(isinstance(entry, Mapping) for entry in data):
            raise ItemSourceError(
                "Item file must contain a list of item mappings", file_path=str(file_path)
            )

        try:
            store = cls(data)
        except ValidationError as e:
            raise ItemSourceError(
                "Item file contains invalid items", file_path=str(file_path), original_error=e
            ) from e

        logger.debug(f"Loaded {len(store)} items from {file_path}")
        return store
