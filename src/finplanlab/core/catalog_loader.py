"""Utilities for loading plan catalogs from YAML/JSON sources."""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from .kinds import K
from .plan import Plan
from .templates import get_entity_template
from .utils import date_to_epoch_day, parse_date_string, slugify_name

__all__ = [
    "CatalogError",
    "CatalogDefinition",
    "load_catalog",
    "load_plan",
]

logger = logging.getLogger(__name__)

# Keys inside an entity's ``data`` block that point at other entities
_REFERENCE_KEYS = ("targetEntityId", "sourceEntityId", "paymentSourceEntityId")


class CatalogError(ValueError):
    """Raised when a catalog file cannot be parsed or validated."""


@dataclass(slots=True)
class CatalogDefinition:
    """Structured representation of a plan catalog."""

    plan: dict[str, Any]
    entities: list[dict[str, Any]]
    metadata: dict[str, Any] = field(default_factory=dict)
    source: str = "<memory>"

    def to_dict(self) -> dict[str, Any]:
        """Plan record with nested entity records, as accepted by `Plan.from_dict`."""
        return {**deepcopy(self.plan), "entities": deepcopy(self.entities)}

    def build_plan(self, today_day: int | None = None) -> Plan:
        return Plan.from_dict(self.to_dict(), today_day=today_day)


def load_catalog(
    source: str | Path | dict[str, Any], *, format: str | None = None
) -> CatalogDefinition:
    """
    Parse a plan catalog from YAML/JSON/dict into normalized records.

    Entities may omit ``id`` (derived from ``name``) and ``type`` (inferred from
    ``templateKey``). Ledger entries may give an ISO ``date`` instead of an epoch
    ``day``. References in ``data`` and ``parentId`` may use either an entity's id
    or its name.
    """

    mapping, label = _read_source(source, format=format)
    plan = _normalize_plan(mapping.get("plan"), label)
    entities = _normalize_entities(mapping.get("entities"), label)
    _resolve_references(entities, label)
    metadata = {"version": mapping.get("version", 1)}
    return CatalogDefinition(
        plan=plan,
        entities=entities,
        metadata=metadata,
        source=label,
    )


def load_plan(
    source: str | Path | dict[str, Any],
    *,
    format: str | None = None,
    today_day: int | None = None,
) -> Plan:
    """Load a catalog and build its `Plan` in one step."""
    return load_catalog(source, format=format).build_plan(today_day=today_day)


def _read_source(
    source: str | Path | dict[str, Any], *, format: str | None
) -> tuple[dict[str, Any], str]:
    if isinstance(source, dict):
        return deepcopy(source), "<mapping>"

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(path)

    fmt = (format or path.suffix.lstrip(".")).lower()
    text = path.read_text(encoding="utf-8")
    try:
        if fmt in {"yaml", "yml", ""}:
            data = yaml.safe_load(text)
        elif fmt == "json":
            data = json.loads(text)
        else:
            raise CatalogError(f"Unsupported catalog format '{fmt}' for {path}")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CatalogError(f"Catalog root must be a mapping (source={path})")
    return data, str(path)


def _normalize_plan(raw: Any, label: str) -> dict[str, Any]:
    ctx = f"{label}::plan"
    if raw is None:
        raise CatalogError(f"{ctx}: 'plan' section is required")
    data = _ensure_dict(raw, ctx)

    name = _coerce_str(data.get("name"), f"{ctx}.name")
    birth_date = _coerce_date(data.get("birthDate"), f"{ctx}.birthDate")
    if birth_date is None:
        raise CatalogError(f"{ctx}: 'birthDate' is required")
    retirement_age = _coerce_int(data.get("retirementAge"), f"{ctx}.retirementAge")
    if retirement_age is None:
        raise CatalogError(f"{ctx}: 'retirementAge' is required")

    plan_id = data.get("id")
    plan_id = _coerce_str(plan_id, f"{ctx}.id") if plan_id is not None else slugify_name(name)

    return {
        "id": plan_id,
        "name": name,
        "birthDate": birth_date.isoformat(),
        "retirementAge": retirement_age,
    }


def _normalize_entities(raw: Any, label: str) -> list[dict[str, Any]]:
    entries = _ensure_list(raw, f"{label}::entities", allow_none=True) or []

    entities: list[dict[str, Any]] = []
    seen: set[str] = set()
    for idx, entry in enumerate(entries):
        ctx = f"{label}::entities[{idx}]"
        data = _ensure_dict(entry, ctx)
        name = _coerce_str(data.get("name"), f"{ctx}.name")

        entity_id = data.get("id")
        entity_id = (
            _coerce_str(entity_id, f"{ctx}.id") if entity_id is not None else slugify_name(name)
        )
        if not entity_id:
            raise CatalogError(f"{ctx}: could not derive an id from name '{name}'")
        if entity_id in seen:
            raise CatalogError(f"{ctx}: duplicate entity id '{entity_id}'")
        seen.add(entity_id)

        template_key = data.get("templateKey")
        if template_key is not None:
            template_key = _coerce_str(template_key, f"{ctx}.templateKey")
        kind = _infer_kind(data.get("type"), template_key, ctx)

        parent_id = data.get("parentId")
        if parent_id is not None:
            parent_id = _coerce_str(parent_id, f"{ctx}.parentId")

        ledger = _ensure_list(data.get("ledgerEntries"), f"{ctx}.ledgerEntries", allow_none=True)
        entities.append(
            {
                "id": entity_id,
                "name": name,
                "type": kind,
                "templateKey": template_key or "",
                "parentId": parent_id,
                "data": _ensure_dict(data.get("data"), f"{ctx}.data"),
                "ledgerEntries": sorted(
                    (
                        _normalize_ledger_entry(e, f"{ctx}.ledgerEntries[{i}]")
                        for i, e in enumerate(ledger or [])
                    ),
                    key=lambda e: e["day"],
                ),
            }
        )
    return entities


def _normalize_ledger_entry(raw: Any, ctx: str) -> dict[str, Any]:
    data = _ensure_dict(raw, ctx)
    if data.get("day") is not None:
        day = _coerce_int(data["day"], f"{ctx}.day")
    else:
        when = _coerce_date(data.get("date"), f"{ctx}.date")
        if when is None:
            raise CatalogError(f"{ctx}: 'day' or 'date' is required")
        day = date_to_epoch_day(when)

    out: dict[str, Any] = {"day": day}
    for key in ("amount", "shareQuantity", "sharePrice"):
        value = _coerce_number(data.get(key), f"{ctx}.{key}")
        if value is not None:
            out[key] = value
    if data.get("id") is not None:
        out["id"] = str(data["id"])
    return out


def _infer_kind(raw_type: Any, template_key: str | None, ctx: str) -> str:
    if raw_type is not None:
        kind = _coerce_str(raw_type, f"{ctx}.type").lower()
    elif template_key is not None:
        template = get_entity_template(template_key)
        if template is None:
            raise CatalogError(f"{ctx}: unknown templateKey '{template_key}'")
        kind = template.kind
    else:
        raise CatalogError(f"{ctx}: 'type' or 'templateKey' is required")

    if kind not in K.serializable_kinds():
        raise CatalogError(f"{ctx}: unknown entity type '{kind}'")
    return kind


def _resolve_references(entities: list[dict[str, Any]], label: str) -> None:
    """Rewrite name-based references to entity ids in place."""
    lookup: dict[str, str] = {}
    for entity in entities:
        lookup.setdefault(entity["name"], entity["id"])
        lookup.setdefault(slugify_name(entity["name"]), entity["id"])
    for entity in entities:
        lookup[entity["id"]] = entity["id"]

    for entity in entities:
        ctx = f"{label}::{entity['id']}"
        for key in _REFERENCE_KEYS:
            ref = entity["data"].get(key)
            if ref:
                entity["data"][key] = _resolve(lookup, ref, f"{ctx}.data.{key}")
        if entity["parentId"]:
            entity["parentId"] = _resolve(lookup, entity["parentId"], f"{ctx}.parentId")


def _resolve(lookup: dict[str, str], ref: Any, ctx: str) -> str:
    ref = str(ref)
    resolved = lookup.get(ref)
    if resolved is None:
        logger.warning("%s: unknown entity reference '%s' left as-is", ctx, ref)
        return ref
    return resolved


def _coerce_date(value: Any, ctx: str) -> date | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_date_string(value)
        except ValueError as exc:
            raise CatalogError(f"{ctx}: invalid ISO date '{value}'") from exc
    raise CatalogError(f"{ctx}: expected ISO date string")


def _coerce_int(value: Any, ctx: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):  # Avoid bool being treated as int
        raise CatalogError(f"{ctx}: expected an integer")
    if isinstance(value, (int, float)):
        return int(value)
    raise CatalogError(f"{ctx}: expected an integer")


def _coerce_number(value: Any, ctx: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(f"{ctx}: expected a number")
    return float(value)


def _coerce_str(value: Any, ctx: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise CatalogError(f"{ctx}: expected non-empty string")
    return value


def _ensure_dict(value: Any, ctx: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise CatalogError(f"{ctx}: expected a mapping")
    return deepcopy(value)


def _ensure_list(value: Any, ctx: str, *, allow_none: bool = False) -> list[Any] | None:
    if value is None:
        if allow_none:
            return None
        raise CatalogError(f"{ctx}: expected a list")
    if not isinstance(value, list):
        raise CatalogError(f"{ctx}: expected a list")
    return list(value)
