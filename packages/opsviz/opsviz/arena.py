"""VisualArena - visual state records indexed by entity id."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generator

from opsviz.state import DerivedState, VisualState
from opsviz.types import DeadEntityError, EntityId, SnapshotError

# Hook callback signature.
HookCallback = Callable[["VisualArena", EntityId, VisualState], None]


class VisualArena:
    def __init__(self) -> None:
        self._records: dict[int, VisualState] = {}
        self._next_id: int = 0
        self._on_spawn: list[HookCallback] = []
        self._on_despawn: list[HookCallback] = []

    def spawn(self, record: VisualState) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._records[eid] = record
        for cb in self._on_spawn:
            cb(self, eid, record)
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        record = self._records.pop(entity_id, None)
        if record is not None:
            for cb in self._on_despawn:
                cb(self, entity_id, record)

    def clear(self) -> None:
        for eid in list(self._records):
            self.despawn(eid)

    def get(self, entity_id: EntityId) -> VisualState:
        record = self._records.get(entity_id)
        if record is None:
            raise DeadEntityError(
                entity_id, f"Entity {entity_id} is not in the arena"
            )
        return record

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._records

    def apply(self, entity_id: EntityId, state: DerivedState) -> bool:
        """Write the driven fields of ``state``. Missing entities are skipped."""
        record = self._records.get(entity_id)
        if record is None:
            return False
        for name, value in state.items():
            setattr(record, name, value)
        return True

    def write(self, entity_id: EntityId, **values: Any) -> bool:
        record = self._records.get(entity_id)
        if record is None:
            return False
        for name, value in values.items():
            if not hasattr(record, name):
                raise AttributeError(f"VisualState has no field {name!r}")
            setattr(record, name, value)
        return True

    def query(
        self, kind: str | None = None
    ) -> Generator[tuple[EntityId, VisualState], None, None]:
        for eid, record in list(self._records.items()):
            if kind is None or record.kind == kind:
                yield eid, record

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._records)

    def __len__(self) -> int:
        return len(self._records)

    # -- Change hooks --

    def on_spawn(self, callback: HookCallback) -> None:
        self._on_spawn.append(callback)

    def on_despawn(self, callback: HookCallback) -> None:
        self._on_despawn.append(callback)

    def off_spawn(self, callback: HookCallback) -> None:
        try:
            self._on_spawn.remove(callback)
        except ValueError:
            pass

    def off_despawn(self, callback: HookCallback) -> None:
        try:
            self._on_despawn.remove(callback)
        except ValueError:
            pass

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        return {
            "next_id": self._next_id,
            "records": {
                str(eid): dataclasses.asdict(record)
                for eid, record in self._records.items()
            },
        }

    def restore(self, data: dict[str, Any]) -> None:
        try:
            records = {}
            for eid_str, fields in data["records"].items():
                fields = dict(fields)
                if fields.get("ends") is not None:
                    fields["ends"] = tuple(fields["ends"])
                records[int(eid_str)] = VisualState(**fields)
        except (KeyError, TypeError) as exc:
            raise SnapshotError(f"Malformed arena snapshot: {exc}") from exc
        self._records = records
        self._next_id = data.get("next_id", max(records, default=-1) + 1)
