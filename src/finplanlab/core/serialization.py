"""
Conversion between entity records and `Entity` values.

Records use the wire shape supplied by the persistence layer:

    {
        "id": "...", "name": "...", "type": "account", "templateKey": "savings",
        "parentId": null, "data": {...},
        "ledgerEntries": [{"day": 19723, "amount": 1000.0}, ...]
    }
"""

from __future__ import annotations

from typing import Any

from .entity import Entity
from .errors import ConfigError, UnknownEntityTypeError
from .kinds import K
from .ledger import LedgerEntry
from .specs import SpecTypes
from .utils import epoch_day_to_date, today_epoch_day


def deserialize_entity(data: dict[str, Any]) -> Entity:
    """
    Create an entity of the proper kind from a record.

    Type matching is case-insensitive.

    Raises:
        UnknownEntityTypeError: If ``type`` does not name a serializable kind
    """
    kind = str(data.get("type", "")).lower()
    spec_type = SpecTypes.get(kind)
    if spec_type is None:
        raise UnknownEntityTypeError(kind)

    ledger = [LedgerEntry.from_dict(e) for e in data.get("ledgerEntries") or []]

    # Records without a schedule get a monthly rule anchored at their first entry
    default_start = epoch_day_to_date(ledger[0].day if ledger else today_epoch_day())

    return Entity(
        id=data["id"],
        name=data["name"],
        kind=kind,
        spec=spec_type.from_dict(data.get("data") or {}, default_start),
        template_key=data.get("templateKey") or "",
        parent_id=data.get("parentId"),
        ledger=ledger,
    )


def deserialize_entities(records: list[dict[str, Any]]) -> list[Entity]:
    """Deserialize multiple entity records, preserving order."""
    return [deserialize_entity(r) for r in records]


def serialize_entity(entity: Entity) -> dict[str, Any]:
    """
    Record form of an entity.

    Raises:
        ConfigError: For the fallback entity, which is never persisted
    """
    if entity.kind == K.FALLBACK:
        raise ConfigError("Fallback entity cannot be serialized")

    return {
        "id": entity.id,
        "name": entity.name,
        "type": entity.kind,
        "templateKey": entity.template_key,
        "parentId": entity.parent_id,
        "data": entity.spec.to_dict(),
        "ledgerEntries": [e.to_dict() for e in entity.ledger],
    }
