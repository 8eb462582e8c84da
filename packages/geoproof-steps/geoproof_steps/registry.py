"""ElementRegistry - symbolic names for the drawables a step owns."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Sequence, Union

if TYPE_CHECKING:
    from geoproof import DrawableId, Scene

logger = logging.getLogger(__name__)

Handle = Union[int, Sequence[int]]


class ElementRegistry:
    """Maps keys like ``"pointC"`` to one drawable or an ordered list of them.

    Discarding a key destroys its drawables. A key is only ever registered
    once: registering it again discards the stale drawables first.
    """

    def __init__(self, scene: Scene) -> None:
        self._scene = scene
        self._entries: dict[str, Handle] = {}

    def register(self, key: str, handle: Handle) -> Handle:
        if key in self._entries:
            logger.debug("re-registering %s; discarding the stale drawables", key)
            self.discard(key)
        self._entries[key] = handle if isinstance(handle, int) else tuple(handle)
        return handle

    def get(self, key: str) -> Handle | None:
        return self._entries.get(key)

    def first(self, key: str) -> DrawableId | None:
        """The single drawable under ``key``, or the first of its list."""
        ids = self.ids(key)
        return ids[0] if ids else None

    def ids(self, key: str) -> list[DrawableId]:
        handle = self._entries.get(key)
        if handle is None:
            return []
        if isinstance(handle, int):
            return [handle]
        return list(handle)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def discard(self, key: str) -> bool:
        """Destroy the drawables under ``key`` and forget it.

        A missing key is logged and tolerated; it was already cleared.
        """
        handle = self._entries.pop(key, None)
        if handle is None:
            logger.warning("registry has no %r to discard", key)
            return False
        for did in [handle] if isinstance(handle, int) else handle:
            self._scene.despawn(did)
        return True

    def clear(self) -> None:
        for key in list(self._entries):
            self.discard(key)
