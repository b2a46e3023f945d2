from __future__ import annotations

import logging
from typing import List, Optional

from decider.core import ElicitationStep, MissingRequiredItemError

logger = logging.getLogger(__name__)


class NameListCollector(ElicitationStep):
    """Ordered list of names typed in by the user.

    Whitespace-only input is rejected when it is added, and the final list is
    filtered once more on confirm, so a confirmed list never holds an empty
    or untrimmed entry.
    """

    def __init__(
        self,
        title: str,
        field_label: str,
        hint: str = "",
        require_at_least_one: bool = True,
    ) -> None:
        super().__init__()
        self.title = title
        self.field_label = field_label
        self.hint = hint
        self.require_at_least_one = require_at_least_one
        self._items: List[str] = []
        self._selected: Optional[int] = None
        self._result: List[str] = []

    @property
    def items(self) -> List[str]:
        return list(self._items)

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    def add(self, text: str | None) -> bool:
        self._ensure_open()
        name = (text or "").strip()
        if not name:
            logger.debug("%s: ignored empty entry", self.title)
            return False
        self._items.append(name)
        logger.debug("%s: added %r", self.title, name)
        return True

    def select(self, index: Optional[int]) -> None:
        self._ensure_open()
        if index is None or not (0 <= index < len(self._items)):
            self._selected = None
            return
        self._selected = index

    def remove_selected(self) -> None:
        self._ensure_open()
        if self._selected is None:
            return
        removed = self._items.pop(self._selected)
        self._selected = None
        logger.debug("%s: removed %r", self.title, removed)

    def confirm(self) -> List[str]:
        self._ensure_open()
        if self.require_at_least_one and not self._items:
            logger.warning("%s: confirm rejected, at least one item is required", self.title)
            raise MissingRequiredItemError("Please add at least one item.")
        self._result = [item.strip() for item in self._items if item.strip()]
        self._close()
        logger.info("%s: confirmed %d item(s)", self.title, len(self._result))
        return list(self._result)

    def abandon(self) -> List[str]:
        self._ensure_open()
        self._result = []
        self._close(abandoned=True)
        logger.info("%s: abandoned", self.title)
        return []

    @property
    def result(self) -> List[str]:
        return list(self._result)
