from __future__ import annotations

import math
from datetime import date
from typing import Any, Dict, Generic, List, Mapping, Tuple, Type, TypeVar
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.orm import Session

from schooladmin.exceptions import NotFoundError, ReferentialError, ValidationError
from schooladmin.logging_config import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """
    CRUD over one entity kind.

    Subclasses declare the field rules; every write is validated, and every
    reference resolved, before anything is added to the session.
    """

    model: Type[ModelT]
    entity_name: str = "Entity"

    required_fields: Tuple[str, ...] = ()
    text_fields: Tuple[str, ...] = ()
    non_negative_fields: Tuple[str, ...] = ()
    date_fields: Tuple[str, ...] = ()
    # field -> (model, entity name used in errors)
    references: Mapping[str, Tuple[type, str]] = {}

    def __init__(self, db: Session):
        self.db = db

    # ---------- reads ----------

    def list(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.seq).all()

    def get(self, entity_id: str) -> ModelT:
        obj = self.db.get(self.model, entity_id)
        if obj is None:
            raise NotFoundError(self.entity_name, entity_id)
        return obj

    # ---------- writes ----------

    def create(self, payload: Mapping[str, Any]) -> ModelT:
        values = self._clean(payload)
        missing = [f for f in self.required_fields if values.get(f) is None]
        if missing:
            raise ValidationError(missing[0], "field is required")
        self._validate(values)
        self._check_references(values)

        obj = self.model(id=str(uuid4()), seq=self._next_seq(), **values)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        logger.info("Created %s %s", self.entity_name, obj.id)
        return obj

    def update(self, entity_id: str, partial: Mapping[str, Any]) -> ModelT:
        obj = self.get(entity_id)
        values = self._clean(partial)
        for field in self.required_fields:
            if field in values and values[field] is None:
                raise ValidationError(field, "field is required")
        self._validate(values)
        self._check_references(values)

        for field, value in values.items():
            setattr(obj, field, value)
        self.db.commit()
        self.db.refresh(obj)
        logger.info("Updated %s %s (%s)", self.entity_name, obj.id, ", ".join(sorted(values)) or "no changes")
        return obj

    def delete(self, entity_id: str) -> None:
        obj = self.get(entity_id)
        self._check_delete(obj)
        self.db.delete(obj)
        self.db.commit()
        logger.info("Deleted %s %s", self.entity_name, entity_id)

    # ---------- hooks ----------

    def _check_delete(self, obj: ModelT) -> None:
        """Raise ConflictError when obj is still referenced."""

    # ---------- helpers ----------

    def _writable_fields(self) -> set:
        return set(self.required_fields) | set(self.text_fields) | set(self.non_negative_fields) \
            | set(self.date_fields) | set(self.references)

    def _clean(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        allowed = self._writable_fields()
        unknown = [k for k in payload if k not in allowed]
        if unknown:
            raise ValidationError(unknown[0], "unknown field")
        values = dict(payload)
        for field in self.text_fields:
            if isinstance(values.get(field), str):
                values[field] = values[field].strip()
        return values

    def _validate(self, values: Dict[str, Any]) -> None:
        for field in self.text_fields:
            if field in values and values[field] is not None:
                if not isinstance(values[field], str) or not values[field]:
                    raise ValidationError(field, "must be a non-empty string")
        for field in self.non_negative_fields:
            if field in values and values[field] is not None:
                value = values[field]
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValidationError(field, "must be a finite non-negative number")
                if not math.isfinite(value) or value < 0:
                    raise ValidationError(field, "must be a finite non-negative number")
        for field in self.date_fields:
            if field in values and values[field] is not None and not isinstance(values[field], date):
                raise ValidationError(field, "must be a date")

    def _check_references(self, values: Dict[str, Any]) -> None:
        for field, (ref_model, ref_name) in self.references.items():
            ref_id = values.get(field)
            if ref_id is None:
                continue
            if self.db.get(ref_model, ref_id) is None:
                raise ReferentialError(field, ref_name, ref_id)

    def _next_seq(self) -> int:
        current = self.db.query(func.max(self.model.seq)).scalar()
        return (current or 0) + 1
