"""Standard routes shared by every cached kind.

add_crud_routes() registers list, active list, get, create, update and delete
on a router. Modules add their own static paths (``/order``, ``/content``...)
before calling it so those are matched ahead of ``/{item_id}``.
"""

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from venuehub.core.limiter import limit_writes
from venuehub.domain.exceptions import ResourceNotFoundException
from venuehub.schemas.common import ApiResponse

ForceRefresh = Annotated[bool, Query(alias="forceRefresh")]


def create_payload(body: BaseModel) -> dict[str, Any]:
    """Request body as stored document fields (camelCase, no nulls)."""
    return body.model_dump(mode="json", by_alias=True, exclude_none=True)


def update_payload(body: BaseModel) -> dict[str, Any]:
    """Only the fields the client sent (camelCase, no nulls)."""
    return body.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)


def _named(name: str) -> Callable:
    """Give a generated endpoint its own name (route name and rate-limit key)."""

    def rename(fn: Callable) -> Callable:
        fn.__name__ = fn.__qualname__ = name
        return fn

    return rename


def add_crud_routes(
    router: APIRouter,
    *,
    get_repo: Callable[..., Any],
    create_model: type[BaseModel],
    update_model: type[BaseModel],
    response_model: type[BaseModel],
    label: str,
    plural: str,
    with_active: bool = True,
) -> APIRouter:
    """Register the standard routes for one kind on router.

    Args:
        get_repo: Depends() function returning the kind's repository.
        create_model / update_model: Request bodies for POST and PUT.
        response_model: Schema built from the repository's result objects.
        label / plural: Used in response messages ('Hero slide', 'Hero slides').
        with_active: Also register GET /active.
    """
    Repo = Annotated[Any, Depends(get_repo)]
    Many = ApiResponse[list[response_model]]
    One = ApiResponse[response_model]
    slug = plural.lower().replace(" ", "_")

    def one(item: Any) -> Any:
        return response_model.model_validate(item)

    @router.get("", response_model=Many)
    @_named(f"list_{slug}")
    async def list_items(repo: Repo, force_refresh: ForceRefresh = False):
        items = await repo.get_all(force_refresh=force_refresh)
        return Many(data=[one(i) for i in items], message=f"{plural} fetched successfully")

    if with_active:

        @router.get("/active", response_model=Many)
        @_named(f"list_active_{slug}")
        async def list_active_items(repo: Repo, force_refresh: ForceRefresh = True):
            items = await repo.get_active(force_refresh=force_refresh)
            return Many(
                data=[one(i) for i in items],
                message=f"Active {plural.lower()} fetched successfully",
            )

    @router.get("/{item_id}", response_model=One)
    @_named(f"get_{slug}")
    async def get_item(item_id: str, repo: Repo):
        item = await repo.get_by_id(item_id)
        if item is None:
            raise ResourceNotFoundException(repo.kind, item_id)
        return One(data=one(item), message=f"{label} fetched successfully")

    @router.post("", response_model=One, status_code=201)
    @limit_writes
    @_named(f"create_{slug}")
    async def create_item(request: Request, body: create_model, repo: Repo):  # type: ignore[valid-type]
        created = await repo.create(create_payload(body))
        return One(data=one(created), message=f"{label} created successfully")

    @router.put("/{item_id}", response_model=One)
    @limit_writes
    @_named(f"update_{slug}")
    async def update_item(request: Request, item_id: str, body: update_model, repo: Repo):  # type: ignore[valid-type]
        updated = await repo.update(entity_id=item_id, data=update_payload(body))
        return One(data=one(updated), message=f"{label} updated successfully")

    @router.delete("/{item_id}", response_model=ApiResponse[dict[str, str]])
    @limit_writes
    @_named(f"delete_{slug}")
    async def delete_item(request: Request, item_id: str, repo: Repo):
        await repo.delete(entity_id=item_id)
        return ApiResponse[dict[str, str]](
            data={"id": item_id}, message=f"{label} deleted successfully"
        )

    return router
