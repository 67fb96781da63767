"""
Per-entity mirror of server state.

A :class:`RecordCache` holds the last known list of records for one
entity and broadcasts a copy of the full list to its subscribers
whenever that list changes.  Writes are optimistic: the local list is
changed whether or not the server accepted the write, and writes the
server did not see are kept in a pending queue until :meth:`reconcile`
replays them.  Listing falls back to the cached list when the server is
unreachable; fetching a single record does not.
"""
from __future__ import annotations

import enum
import itertools
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar, Union

from .errors import NotFound, TransportFailure, ValidationFailure
from .models import Record
from .resources import ResourceClient

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)
T = TypeVar("T")


class Broadcast(Generic[T]):
    """Synchronous fan-out to subscribers.  Late subscribers get no replay."""

    def __init__(self):
        self._subscribers: List[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def emit(self, value: T) -> None:
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception:
                logger.exception("Subscriber %r failed", callback)

    def __len__(self) -> int:
        return len(self._subscribers)


class CacheState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    POPULATED = "populated"
    STALE_ON_ERROR = "stale_on_error"
    MUTATING = "mutating"


class PendingKind(enum.Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass
class PendingMutation:
    kind: PendingKind
    record_id: str
    record: Optional[Record] = None
    # failed attempts so far, including the original call
    attempts: int = 1


@dataclass
class ReconcileReport:
    confirmed: List[str] = field(default_factory=list)
    rolled_back: List[str] = field(default_factory=list)
    pending: List[str] = field(default_factory=list)
    # placeholder id -> server id
    replaced_ids: Dict[str, str] = field(default_factory=dict)

    @property
    def settled(self) -> bool:
        return not self.pending


class RecordCache(Generic[R]):
    def __init__(self, client: ResourceClient[R], placeholder_prefix: str = "local-"):
        self.client = client
        self.placeholder_prefix = placeholder_prefix
        self.state = CacheState.IDLE
        self.updates: Broadcast[List[R]] = Broadcast()
        self._records: List[R] = []
        self._pending: List[PendingMutation] = []
        self._placeholder_seq = itertools.count(1)

    @property
    def label(self) -> str:
        return self.client.resource.label

    # -- snapshots -------------------------------------------------------

    @property
    def records(self) -> List[R]:
        return [replace(r) for r in self._records]

    @property
    def pending(self) -> Tuple[PendingMutation, ...]:
        return tuple(replace(m) for m in self._pending)

    def get(self, record_id: str) -> Optional[R]:
        index = self._index_of(record_id)
        return None if index is None else replace(self._records[index])

    def search(self, term: str) -> List[R]:
        term = (term or "").strip()
        if not term:
            return self.records
        return [replace(r) for r in self._records if r.matches(term)]

    def subscribe(self, callback: Callable[[List[R]], None]) -> Callable[[], None]:
        return self.updates.subscribe(callback)

    def is_placeholder(self, record_id: Optional[str]) -> bool:
        return bool(record_id) and record_id.startswith(self.placeholder_prefix)

    # -- remote reads ----------------------------------------------------

    def read_all(self) -> List[R]:
        """Refresh from the server, or return the cached list if it cannot be reached."""
        self.state = CacheState.FETCHING
        try:
            result = self.client.list_all()
        except TransportFailure as exc:
            logger.warning("Fetching %s failed, serving cached list: %s", self.label, exc)
            self.state = CacheState.STALE_ON_ERROR
            return self.records
        self._records = list(result.records)
        self.state = CacheState.POPULATED
        self._publish()
        return self.records

    def fetch(self, record_id: str) -> R:
        # no fallback here; an edit form must not be filled from stale data
        return self.client.fetch(record_id)

    def list_by_patient(self, patient_id: str) -> List[R]:
        return self.client.list_by_patient(patient_id).records

    # -- optimistic writes -----------------------------------------------

    def create(self, record: R) -> R:
        record.validate()
        if record.id:
            raise ValidationFailure([f"New {self.label.lower()} must not carry an id"])
        with self._mutating():
            try:
                result = self.client.create(record)
            except TransportFailure as exc:
                stored = record.with_id(self._next_placeholder())
                logger.warning(
                    "Creating %s failed, kept locally as %s: %s", self.label.lower(), stored.id, exc,
                )
                self._pending.append(PendingMutation(PendingKind.CREATE, stored.id, stored))
            else:
                stored = record.with_id(result.id)
            self._records.append(stored)
            self._publish()
        return replace(stored)

    def update(self, record: R) -> R:
        record.validate()
        if not record.id:
            raise ValidationFailure([f"No {self.label.lower()} selected for update"])
        stored = replace(record)
        with self._mutating():
            if self.is_placeholder(stored.id):
                self._fold_into_pending_create(stored)
            else:
                try:
                    self.client.replace(stored.id, stored)
                except TransportFailure as exc:
                    logger.warning("Updating %s %s failed, kept locally: %s", self.label.lower(), stored.id, exc)
                    self._queue_update(stored)
            index = self._index_of(stored.id)
            if index is not None:
                self._records[index] = stored
            self._publish()
        return replace(stored)

    def delete(self, target: Union[str, int]) -> None:
        """Delete by internal id, or by position in the cached list."""
        if isinstance(target, int):
            if not 0 <= target < len(self._records):
                return
            record = self._records[target]
            if record.id:
                return self.delete(record.id)
            with self._mutating():
                del self._records[target]
                self._publish()
            return

        record_id = target
        placeholder = self.is_placeholder(record_id)
        with self._mutating():
            try:
                self.client.delete(record_id)
            except NotFound:
                logger.info("%s %s was already gone from the server", self.label, record_id)
            except TransportFailure as exc:
                logger.warning("Deleting %s %s failed, removed locally: %s", self.label.lower(), record_id, exc)
                if not placeholder:
                    self._pending.append(PendingMutation(PendingKind.DELETE, record_id))
            # earlier writes to this record are superseded
            self._pending = [
                m for m in self._pending
                if m.record_id != record_id or m.kind is PendingKind.DELETE
            ]
            self._records = [r for r in self._records if r.id != record_id]
            self._publish()

    # -- reconciliation --------------------------------------------------

    def reconcile(self) -> ReconcileReport:
        """Replay pending writes in order and settle what the server confirms."""
        report = ReconcileReport()
        if not self._pending:
            return report
        changed = False
        remaining: List[PendingMutation] = []
        with self._mutating():
            for mutation in self._pending:
                try:
                    changed |= self._replay(mutation, report)
                except TransportFailure as exc:
                    mutation.attempts += 1
                    remaining.append(mutation)
                    report.pending.append(mutation.record_id)
                    logger.warning(
                        "%s of %s %s still pending after %d attempts: %s",
                        mutation.kind.value.capitalize(), self.label.lower(),
                        mutation.record_id, mutation.attempts, exc,
                    )
            self._pending = remaining
            if changed:
                self._publish()
        return report

    def _replay(self, mutation: PendingMutation, report: ReconcileReport) -> bool:
        """Send one pending write.  Returns whether the cached list changed."""
        if mutation.kind is PendingKind.CREATE:
            result = self.client.create(mutation.record)
            stored = mutation.record.with_id(result.id)
            index = self._index_of(mutation.record_id)
            if index is None:
                # a read_all dropped the local copy
                self._records.append(stored)
            else:
                self._records[index] = stored
            report.confirmed.append(result.id)
            report.replaced_ids[mutation.record_id] = result.id
            return True

        if mutation.kind is PendingKind.UPDATE:
            try:
                self.client.replace(mutation.record_id, mutation.record)
            except NotFound:
                index = self._index_of(mutation.record_id)
                if index is not None:
                    del self._records[index]
                report.rolled_back.append(mutation.record_id)
                return index is not None
            report.confirmed.append(mutation.record_id)
            index = self._index_of(mutation.record_id)
            if index is None:
                # a read_all dropped the entry
                self._records.append(mutation.record)
                return True
            if self._records[index] == mutation.record:
                return False
            self._records[index] = mutation.record
            return True

        try:
            self.client.delete(mutation.record_id)
        except NotFound:
            pass
        report.confirmed.append(mutation.record_id)
        index = self._index_of(mutation.record_id)
        if index is None:
            return False
        # a read_all restored the entry before the delete reached the server
        del self._records[index]
        return True

    # -- helpers ---------------------------------------------------------

    @contextmanager
    def _mutating(self):
        self.state = CacheState.MUTATING
        try:
            yield
        finally:
            self.state = CacheState.POPULATED

    def _publish(self) -> None:
        self.updates.emit(self.records)

    def _next_placeholder(self) -> str:
        return f"{self.placeholder_prefix}{next(self._placeholder_seq)}"

    def _index_of(self, record_id: Optional[str]) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _fold_into_pending_create(self, record: R) -> None:
        for mutation in self._pending:
            if mutation.kind is PendingKind.CREATE and mutation.record_id == record.id:
                mutation.record = record
                return

    def _queue_update(self, record: R) -> None:
        for mutation in self._pending:
            if mutation.kind is PendingKind.UPDATE and mutation.record_id == record.id:
                mutation.record = record
                return
        self._pending.append(PendingMutation(PendingKind.UPDATE, record.id, record))
