"""Content Service layer. Generic singleton and ordered-collection resources shared by every content type.

Reads made for public pages never raise: backend errors are logged and the caller gets
``None`` / ``[]``. Admin reads raise :class:`BackendUnavailable` instead. Writes return a
:class:`MutationResult` and, on success, revalidate every public page that shows the content.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import Query, Session

from app.models.mixins import SINGLETON_ID
from app.services import storage_service
from app.services.revalidation import mark_degraded, revalidate_path

logger = logging.getLogger(__name__)

PROTECTED_FIELDS = {"id", "version", "created_at", "updated_at"}


class BackendUnavailable(Exception):
    pass


@dataclass
class MutationResult:
    success: bool
    data: Any = None
    error: Optional[str] = None
    status_code: int = 200

    @classmethod
    def ok(cls, data: Any = None) -> "MutationResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, status_code: int = 400) -> "MutationResult":
        return cls(success=False, error=error, status_code=status_code)


def column_keys(model) -> set[str]:
    return {attr.key for attr in sa_inspect(model).column_attrs}


def row_to_dict(row) -> dict:
    return {key: getattr(row, key) for key in column_keys(type(row))}


def error_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class _Resource:
    def __init__(
        self,
        model,
        label: str,
        pages: Iterable[str] = (),
        layout_pages: Iterable[str] = (),
    ):
        self.model = model
        self.label = label
        self.pages = tuple(pages)
        self.layout_pages = tuple(layout_pages)
        self._columns = column_keys(model)

    def _writable(self, data: dict, protected: set[str] = PROTECTED_FIELDS) -> dict:
        return {key: value for key, value in data.items() if key in self._columns and key not in protected}

    def _apply(self, row, patch: dict) -> None:
        for key, value in self._writable(patch).items():
            setattr(row, key, value)

    def revalidate(self) -> None:
        for path in self.pages:
            revalidate_path(path)
        for path in self.layout_pages:
            revalidate_path(path, scope="layout")

    def _degraded(self, db: Session, action: str, exc: SQLAlchemyError) -> None:
        db.rollback()
        logger.warning("[content] failed to %s %s: %s", action, self.label, exc)
        mark_degraded()

    def _failed(self, db: Session, action: str, exc: SQLAlchemyError) -> MutationResult:
        db.rollback()
        message = error_message(exc)
        logger.warning("[content] failed to %s %s: %s", action, self.label, message)
        return MutationResult.fail(message)


class SingletonResource(_Resource):
    """A table that holds exactly one logical row, pinned to ``id = SINGLETON_ID``."""

    def __init__(
        self,
        model,
        label: str,
        pages=(),
        layout_pages=(),
        defaults=None,
        insert_defaults=None,
        asset_fields: dict[str, str] | None = None,
    ):
        super().__init__(model, label, pages=pages, layout_pages=layout_pages)
        self.defaults = dict(defaults or {})
        self.insert_defaults = dict(insert_defaults or {})
        self.asset_fields = dict(asset_fields or {})

    def asset_urls(self, db: Session) -> set[str]:
        row = db.get(self.model, SINGLETON_ID)
        if row is None:
            return set()
        return {getattr(row, field) for field in self.asset_fields if getattr(row, field, None)}

    def fetch(self, db: Session):
        try:
            return db.get(self.model, SINGLETON_ID)
        except SQLAlchemyError as exc:
            self._degraded(db, "fetch", exc)
            return None

    def fetch_or_default(self, db: Session, default: dict | None = None) -> dict:
        row = self.fetch(db)
        if row is None:
            return dict(self.defaults if default is None else default)
        return row_to_dict(row)

    def get_admin(self, db: Session):
        try:
            return db.get(self.model, SINGLETON_ID)
        except SQLAlchemyError as exc:
            logger.warning("[content] failed to load %s for admin: %s", self.label, exc)
            raise BackendUnavailable(error_message(exc)) from exc

    def _stale(self, row, expected_version: int | None) -> MutationResult | None:
        if expected_version is None or int(row.version or 0) == int(expected_version):
            return None
        return MutationResult.fail(
            f"{self.label} was changed by another editor (version {row.version}). Reload and try again.",
            status_code=409,
        )

    def upsert(self, db: Session, patch: dict, expected_version: int | None = None) -> MutationResult:
        try:
            row = db.get(self.model, SINGLETON_ID)
            if row is None:
                row = self.model(**{**self.insert_defaults, **self._writable(patch)})
                row.id = SINGLETON_ID
                row.version = 1
                db.add(row)
                try:
                    db.commit()
                except IntegrityError:
                    db.rollback()
                    row = db.get(self.model, SINGLETON_ID)
                    if row is None:
                        raise
                    # Lost the insert race; continue as an update of the winning row.
                    stale = self._stale(row, expected_version)
                    if stale is not None:
                        return stale
                    self._apply(row, patch)
                    row.version = int(row.version or 0) + 1
                    db.commit()
            else:
                stale = self._stale(row, expected_version)
                if stale is not None:
                    return stale
                self._apply(row, patch)
                row.version = int(row.version or 0) + 1
                db.commit()
            db.refresh(row)
        except SQLAlchemyError as exc:
            return self._failed(db, "save", exc)

        self.revalidate()
        return MutationResult.ok(row)


class CollectionResource(_Resource):
    """Many rows ordered by ``display_order`` with an optional visibility flag and owned assets."""

    def __init__(
        self,
        model,
        label: str,
        pages=(),
        layout_pages=(),
        visibility_field: str | None = "is_active",
        asset_fields: dict[str, str] | None = None,
        multi_asset_fields: dict[str, str] | None = None,
        admin_order_by: Callable[[Any], list] | None = None,
        before_delete: Callable[[Session, Any], None] | None = None,
    ):
        super().__init__(model, label, pages=pages, layout_pages=layout_pages)
        self.visibility_field = visibility_field
        self.asset_fields = dict(asset_fields or {})
        self.multi_asset_fields = dict(multi_asset_fields or {})
        self.admin_order_by = admin_order_by
        self.before_delete = before_delete

    def _base_query(self, db: Session, filters: dict | None, visible_only: bool) -> Query:
        query = db.query(self.model)
        if visible_only and self.visibility_field:
            query = query.filter(getattr(self.model, self.visibility_field) == True)  # noqa: E712
        for key, value in (filters or {}).items():
            if value is None:
                continue
            query = query.filter(getattr(self.model, key) == value)
        return query

    def _ordered(self, query: Query) -> Query:
        return query.order_by(self.model.display_order.asc(), self.model.id.asc())

    def list_public(self, db: Session, filters: dict | None = None, limit: int | None = None, offset: int = 0) -> list:
        try:
            query = self._ordered(self._base_query(db, filters, visible_only=True))
            if offset:
                query = query.offset(offset)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as exc:
            self._degraded(db, "list", exc)
            return []

    def count_public(self, db: Session, filters: dict | None = None) -> int:
        try:
            return self._base_query(db, filters, visible_only=True).count()
        except SQLAlchemyError as exc:
            self._degraded(db, "count", exc)
            return 0

    def get_public(self, db: Session, item_id: int):
        try:
            row = db.get(self.model, item_id)
        except SQLAlchemyError as exc:
            self._degraded(db, f"fetch #{item_id} of", exc)
            return None
        if row is not None and self.visibility_field and not getattr(row, self.visibility_field):
            return None
        return row

    def list_admin(self, db: Session, filters: dict | None = None) -> list:
        try:
            query = self._base_query(db, filters, visible_only=False)
            if self.admin_order_by is not None:
                query = query.order_by(*self.admin_order_by(self.model))
            else:
                query = self._ordered(query)
            return query.all()
        except SQLAlchemyError as exc:
            logger.warning("[content] failed to list %s for admin: %s", self.label, exc)
            raise BackendUnavailable(error_message(exc)) from exc

    def count(self, db: Session, filters: dict | None = None) -> int:
        try:
            return self._base_query(db, filters, visible_only=False).count()
        except SQLAlchemyError as exc:
            raise BackendUnavailable(error_message(exc)) from exc

    def get(self, db: Session, item_id: int):
        try:
            return db.get(self.model, item_id)
        except SQLAlchemyError as exc:
            raise BackendUnavailable(error_message(exc)) from exc

    def next_display_order(self, db: Session) -> int:
        max_order = db.query(func.max(self.model.display_order)).scalar()
        return 0 if max_order is None else int(max_order) + 1

    def add(self, db: Session, data: dict) -> MutationResult:
        try:
            values = self._writable(data)
            if values.get("display_order") is None:
                values["display_order"] = self.next_display_order(db)
            row = self.model(**values)
            db.add(row)
            db.commit()
            db.refresh(row)
        except SQLAlchemyError as exc:
            return self._failed(db, "add", exc)

        self.revalidate()
        return MutationResult.ok(row)

    def update(self, db: Session, item_id: int, patch: dict) -> MutationResult:
        try:
            row = db.get(self.model, item_id)
            if row is None:
                return MutationResult.fail(f"{self.label} not found.", status_code=404)
            self._apply(row, patch)
            db.commit()
            db.refresh(row)
        except SQLAlchemyError as exc:
            return self._failed(db, "update", exc)

        self.revalidate()
        return MutationResult.ok(row)

    def delete(self, db: Session, item_id: int) -> MutationResult:
        try:
            row = db.get(self.model, item_id)
        except SQLAlchemyError as exc:
            return self._failed(db, "delete", exc)
        if row is None:
            return MutationResult.fail(f"{self.label} not found.", status_code=404)

        # Assets go first and best-effort; the row delete proceeds regardless.
        self._delete_assets(row)

        try:
            if self.before_delete is not None:
                self.before_delete(db, row)
            db.delete(row)
            db.commit()
        except SQLAlchemyError as exc:
            return self._failed(db, "delete", exc)

        self.revalidate()
        return MutationResult.ok({"id": item_id})

    def _delete_assets(self, row) -> None:
        for field, folder in self.asset_fields.items():
            url = getattr(row, field, None)
            if not url:
                continue
            try:
                storage_service.delete_by_url(url, folder)
            except storage_service.StorageError as exc:
                logger.warning("[content] could not delete %s asset %s: %s", self.label, url, exc)
        for field, folder in self.multi_asset_fields.items():
            urls = getattr(row, field, None) or []
            if isinstance(urls, list) and not storage_service.delete_many_by_url(urls, folder):
                logger.warning("[content] some %s %s assets were not deleted", self.label, field)

    def reorder(self, db: Session, ordered_ids: list[int]) -> MutationResult:
        """Assign ``display_order = index`` to each listed id in a single transaction."""
        if len(set(ordered_ids)) != len(ordered_ids):
            return MutationResult.fail("Duplicate ids in reorder request.")
        try:
            rows = db.query(self.model).filter(self.model.id.in_(ordered_ids)).all() if ordered_ids else []
            by_id = {row.id: row for row in rows}
            missing = [item_id for item_id in ordered_ids if item_id not in by_id]
            if missing:
                return MutationResult.fail(
                    f"Unknown {self.label} ids: {', '.join(str(i) for i in missing)}",
                    status_code=404,
                )
            for index, item_id in enumerate(ordered_ids):
                by_id[item_id].display_order = index
            db.commit()
        except SQLAlchemyError as exc:
            return self._failed(db, "reorder", exc)

        self.revalidate()
        return MutationResult.ok([by_id[item_id] for item_id in ordered_ids])

    def asset_urls(self, db: Session) -> set[str]:
        """Every asset URL currently referenced by this collection."""
        found: set[str] = set()
        fields = list(self.asset_fields) + list(self.multi_asset_fields)
        if not fields:
            return found
        for row in db.query(*[getattr(self.model, field) for field in fields]).all():
            for value in row:
                if isinstance(value, list):
                    found.update(url for url in value if url)
                elif value:
                    found.add(value)
        return found
