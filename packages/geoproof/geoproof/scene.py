"""Scene - drawable and component storage with queries."""

from __future__ import annotations

from typing import Any, Callable, Generator, TypeVar, cast

from geoproof.types import DeadDrawableError, DrawableId

T = TypeVar("T")


def component_key(ctype: type) -> str:
    return f"{ctype.__module__}.{ctype.__qualname__}"


class Scene:
    """Every drawable on the canvas is an id carrying components.

    Components are plain dataclasses (shape, style, reveal state, tweens,
    timers). Destroying a drawable drops all of its components, which is
    how in-flight tweens and timers aimed at it are cancelled.
    """

    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._alive: set[int] = set()
        self._registry: dict[str, type] = {}
        self._on_despawn: list[Callable[[Scene, DrawableId], None]] = []

    def spawn(self) -> DrawableId:
        did = self._next_id
        self._next_id += 1
        self._alive.add(did)
        return did

    def despawn(self, drawable_id: DrawableId) -> None:
        if drawable_id not in self._alive:
            return
        self._alive.discard(drawable_id)
        for store in self._components.values():
            store.pop(drawable_id, None)
        for cb in self._on_despawn:
            cb(self, drawable_id)

    def clear(self) -> None:
        """Despawn everything. Ids are never reused."""
        for did in sorted(self._alive):
            self.despawn(did)

    def register_component(self, ctype: type) -> None:
        self._registry[component_key(ctype)] = ctype

    def component_type(self, key: str) -> type | None:
        return self._registry.get(key)

    def attach(self, drawable_id: DrawableId, component: Any) -> None:
        ctype = type(component)
        if drawable_id not in self._alive:
            raise DeadDrawableError(
                drawable_id,
                f"Cannot attach {ctype.__name__} to dead drawable {drawable_id}",
            )
        self.register_component(ctype)
        self._components.setdefault(ctype, {})[drawable_id] = component

    def detach(self, drawable_id: DrawableId, component_type: type) -> None:
        store = self._components.get(component_type)
        if store is not None:
            store.pop(drawable_id, None)

    def get(self, drawable_id: DrawableId, component_type: type[T]) -> T:
        if drawable_id not in self._alive:
            raise DeadDrawableError(
                drawable_id, f"Drawable {drawable_id} is not alive"
            )
        store = self._components.get(component_type)
        if store is None or drawable_id not in store:
            raise KeyError(
                f"Drawable {drawable_id} has no {component_type.__name__} component"
            )
        return cast(T, store[drawable_id])

    def has(self, drawable_id: DrawableId, component_type: type) -> bool:
        if drawable_id not in self._alive:
            return False
        store = self._components.get(component_type)
        return store is not None and drawable_id in store

    def query(
        self, *ctypes: type
    ) -> Generator[tuple[DrawableId, tuple[Any, ...]], None, None]:
        """Yield ``(id, components)`` for live drawables having every type.

        Iteration is in spawn order so later drawables paint on top.
        """
        if not ctypes:
            return
        base_store = self._components.get(ctypes[0])
        if base_store is None:
            return
        for did in sorted(base_store):
            if did not in self._alive:
                continue
            components: list[Any] = []
            for ctype in ctypes:
                store = self._components.get(ctype)
                if store is None or did not in store:
                    break
                components.append(store[did])
            else:
                yield did, tuple(components)

    def drawables(self) -> frozenset[DrawableId]:
        return frozenset(self._alive)

    def alive(self, drawable_id: DrawableId) -> bool:
        return drawable_id in self._alive

    def on_despawn(self, callback: Callable[[Scene, DrawableId], None]) -> None:
        self._on_despawn.append(callback)
