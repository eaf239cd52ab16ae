"""
In-memory content repository.

Stands in for the CMS data layer: stores records per collection and
executes query descriptors built by app.services.queries.

Descriptor support:
- filters:  {field: {"$eq": value}} or {field: value}
- populate: None, "*", "a,b", ["a", "b"] or {"a": True}
Relation fields are omitted from results unless populated.
"""
import copy
import threading
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from app.core.logging import get_safe_logger

logger = get_safe_logger(__name__)

# Relation/media fields per collection
RELATIONS: Dict[str, FrozenSet[str]] = {
    "institution": frozenset({"bannerImage"}),
    "program-section": frozenset({"icon", "program"}),
    "program": frozenset({"sections"}),
    "about-institute": frozenset(),
}

# Keys every new record starts with
COLLECTION_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "institution": {
        "bannerTitle": None,
        "bannerSubtitle": None,
        "bannerImage": None,
    },
    "program-section": {
        "order": 0,
    },
}

SYSTEM_FIELDS = frozenset({"id", "createdAt", "updatedAt"})


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _populated_fields(populate: Any, relations: FrozenSet[str]) -> FrozenSet[str]:
    if populate is None or populate is False:
        return frozenset()
    if populate is True or populate == "*":
        return relations
    if isinstance(populate, str):
        names: Iterable[str] = (p.strip() for p in populate.split(","))
    elif isinstance(populate, dict):
        names = (name for name, enabled in populate.items() if enabled)
    elif isinstance(populate, (list, tuple, set, frozenset)):
        names = populate
    else:
        raise ValueError(f"Unsupported populate value: {type(populate).__name__}")
    return frozenset(name for name in names if name in relations)


def _matches(record: Dict[str, Any], filters: Optional[Dict[str, Any]]) -> bool:
    for field_name, condition in (filters or {}).items():
        if isinstance(condition, dict):
            for operator, expected in condition.items():
                if operator != "$eq":
                    raise ValueError(f"Unsupported filter operator: {operator}")
                if record.get(field_name) != expected:
                    return False
        elif record.get(field_name) != condition:
            return False
    return True


class ContentRepository:
    """
    Thread-safe in-memory record store.

    Returned records are deep copies; mutating them never changes storage.
    """

    def __init__(self):
        self._records: Dict[str, Dict[int, Dict[str, Any]]] = {}
        self._next_ids: Dict[str, int] = {}
        self._lock = threading.Lock()

    def _project(
        self,
        collection: str,
        record: Dict[str, Any],
        populate: Any
    ) -> Dict[str, Any]:
        relations = RELATIONS.get(collection, frozenset())
        keep = _populated_fields(populate, relations)
        return {
            key: copy.deepcopy(value)
            for key, value in record.items()
            if key not in relations or key in keep
        }

    def find(
        self,
        collection: str,
        params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Records matching params["filters"], ordered by id."""
        params = params or {}
        with self._lock:
            stored = self._records.get(collection, {})
            return [
                self._project(collection, record, params.get("populate"))
                for _, record in sorted(stored.items())
                if _matches(record, params.get("filters"))
            ]

    def find_one(
        self,
        collection: str,
        entity_id: int,
        params: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        params = params or {}
        with self._lock:
            record = self._records.get(collection, {}).get(entity_id)
            if record is None or not _matches(record, params.get("filters")):
                return None
            return self._project(collection, record, params.get("populate"))

    def create(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Store a new record and return it with every relation populated."""
        with self._lock:
            entity_id = self._next_ids.get(collection, 1)
            self._next_ids[collection] = entity_id + 1

            now = _now_iso()
            record = copy.deepcopy(COLLECTION_DEFAULTS.get(collection, {}))
            record.update({
                key: copy.deepcopy(value)
                for key, value in data.items()
                if key not in SYSTEM_FIELDS
            })
            record.update({"id": entity_id, "createdAt": now, "updatedAt": now})
            self._records.setdefault(collection, {})[entity_id] = record

            logger.debug("Record created", collection=collection, entity_id=entity_id)
            return self._project(collection, record, "*")

    def update(
        self,
        collection: str,
        entity_id: int,
        data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Merge data into an existing record. Returns None if absent."""
        with self._lock:
            record = self._records.get(collection, {}).get(entity_id)
            if record is None:
                return None

            record.update({
                key: copy.deepcopy(value)
                for key, value in data.items()
                if key not in SYSTEM_FIELDS
            })
            record["updatedAt"] = _now_iso()

            logger.debug("Record updated", collection=collection, entity_id=entity_id)
            return self._project(collection, record, "*")
