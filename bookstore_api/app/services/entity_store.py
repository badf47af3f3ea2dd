"""
In-memory storage for one kind of record.

``EntityStore`` keeps records in insertion order together with the
next id to hand out.  It is deliberately forgiving: lookups of missing
ids return an empty record instead of failing, deletes of missing ids
are no-ops, and creates accept whatever fields the client sent.

Each store is configured with a *field policy*: a mapping from field
name to the coercion applied to incoming values (``verbatim`` for
text, ``parse_leading_int`` for numbers).  Fields that are not part
of the policy are ignored.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from bookstore_api.app.core.coercion import is_truthy

RecordT = TypeVar("RecordT", bound=BaseModel)
FieldPolicy = Mapping[str, Callable[[Any], Any]]

logger = logging.getLogger(__name__)


class EntityStore(Generic[RecordT]):
    """Ordered collection of records with auto-incrementing ids.

    Parameters
    ----------
    name : str
        Singular entity name used in log messages (e.g. ``"book"``).
    model : Type[RecordT]
        Pydantic model for stored records.  Every field must be
        optional; fields never supplied stay unset.
    fields : FieldPolicy
        Coercion applied to each writable field.
    seed : Iterable[Mapping[str, Any]]
        Records restored by :meth:`reset`.  The counter restarts one
        above the highest seeded id.
    """

    def __init__(
        self,
        name: str,
        model: Type[RecordT],
        fields: FieldPolicy,
        seed: Iterable[Mapping[str, Any]] = (),
    ) -> None:
        self.name = name
        self.model = model
        self.fields = dict(fields)
        self._seed: List[Dict[str, Any]] = [dict(row) for row in seed]
        self._lock = threading.RLock()
        self._records: List[RecordT] = []
        self._next_id = 1
        self.reset()

    @property
    def next_id(self) -> int:
        return self._next_id

    def reset(self) -> None:
        """Restore the seed records and the seed counter."""
        with self._lock:
            self._records = [self.model(**row) for row in self._seed]
            self._next_id = max((row["id"] for row in self._seed), default=0) + 1

    def list_all(self) -> List[RecordT]:
        return list(self._records)

    def get_by_id(self, item_id: Optional[int]) -> RecordT:
        """Return the record with ``item_id`` or an empty record.

        The empty record has no fields set and serializes to ``{}``.
        """
        record = self._find(item_id)
        if record is None:
            logger.debug("No %s with id %s", self.name, item_id)
            return self.model()
        return record

    def create(self, fields: Mapping[str, Any]) -> RecordT:
        """Append a new record under the next id and advance the counter."""
        with self._lock:
            record = self.model(id=self._next_id, **self._coerce(fields))
            self._next_id += 1
            self._records.append(record)
        logger.info("Created %s %s", self.name, record.id)
        return record

    def upsert_by_id(self, item_id: Optional[int], fields: Mapping[str, Any]) -> Tuple[RecordT, bool]:
        """Update the record with ``item_id`` or insert it under that id.

        Returns the record and whether it was created.  Inserting never
        touches the counter.  Updating overwrites only the fields whose
        incoming value is truthy.
        """
        with self._lock:
            record = self._find(item_id)
            if record is None:
                record = self.model(id=item_id, **self._coerce(fields))
                self._records.append(record)
                created = True
            else:
                for name, coerce in self.fields.items():
                    value = fields.get(name)
                    if is_truthy(value):
                        setattr(record, name, coerce(value))
                created = False
        logger.info("%s %s %s", "Created" if created else "Updated", self.name, item_id)
        return record, created

    def delete_by_id(self, item_id: Optional[int]) -> None:
        with self._lock:
            before = len(self._records)
            # An unparsable id equals nothing, so nothing is removed.
            self._records = [r for r in self._records if item_id is None or r.id != item_id]
            removed = before - len(self._records)
        if removed:
            logger.info("Deleted %s %s", self.name, item_id)

    def _find(self, item_id: Optional[int]) -> Optional[RecordT]:
        if item_id is None:
            return None
        for record in self._records:
            if record.id == item_id:
                return record
        return None

    def _coerce(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        return {name: coerce(fields[name]) for name, coerce in self.fields.items() if name in fields}

    def __len__(self) -> int:
        return len(self._records)
