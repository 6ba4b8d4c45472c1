"""Registers the standard admin endpoints of an ordered collection on a router."""

from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user
from app.models.user import User
from app.schemas.common import MutationOut, ReorderRequest
from app.services.content_service import CollectionResource
from app.utils.helpers import mutation_response


def register_collection_routes(
    router: APIRouter,
    resource: CollectionResource,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    out_schema: Type[BaseModel],
    include_list: bool = True,
    include_delete: bool = True,
    prepare_create: Optional[Callable[[Session, dict], dict]] = None,
) -> APIRouter:
    """GET list, GET one, POST, PUT, DELETE and PUT /reorder for ``resource``.

    Routers that need a filtered listing or a guarded delete switch the generic one off and declare their own.
    """
    if include_list:
        @router.get("", response_model=List[out_schema])
        def list_items(
            db: Session = Depends(get_db),
            current_user: User = Depends(get_current_user),
        ):
            _ = current_user
            return resource.list_admin(db)

    @router.get("/{item_id:int}", response_model=out_schema)
    def get_item(
        item_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        _ = current_user
        row = resource.get(db, item_id)
        if row is None:
            raise HTTPException(status_code=404, detail=f"{resource.label} not found.")
        return row

    @router.post("", response_model=MutationOut)
    def create_item(
        data: create_schema,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        _ = current_user
        payload = data.model_dump()
        if prepare_create is not None:
            payload = prepare_create(db, payload)
        return mutation_response(resource.add(db, payload), out_schema)

    @router.put("/reorder", response_model=MutationOut)
    def reorder_items(
        data: ReorderRequest,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        _ = current_user
        return mutation_response(resource.reorder(db, data.ids), out_schema)

    @router.put("/{item_id:int}", response_model=MutationOut)
    def update_item(
        item_id: int,
        data: update_schema,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        _ = current_user
        return mutation_response(resource.update(db, item_id, data.model_dump(exclude_unset=True)), out_schema)

    if not include_delete:
        return router

    @router.delete("/{item_id:int}", response_model=MutationOut)
    def delete_item(
        item_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
    ):
        _ = current_user
        return mutation_response(resource.delete(db, item_id))

    return router
