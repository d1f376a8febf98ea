"""
Resource library - public, read-only.

Resources are seeded at startup. A resource with no industry applies to
every industry, so the industry filter returns those rows too.
"""

from fastapi import APIRouter, Depends
from typing import List

from app.core.exceptions import NotFoundError
from app.models.kinds import EntityKind
from app.models.resource import Resource
from app.modules.storage import EntityStore, get_store

router = APIRouter()


@router.get("", response_model=List[Resource])
async def list_resources(store: EntityStore = Depends(get_store)):
    return await store.list(EntityKind.RESOURCE)


@router.get("/category/{category}", response_model=List[Resource])
async def list_resources_by_category(category: str, store: EntityStore = Depends(get_store)):
    return await store.list(EntityKind.RESOURCE, category=category)


@router.get("/industry/{industry}", response_model=List[Resource])
async def list_resources_by_industry(industry: str, store: EntityStore = Depends(get_store)):
    resources = await store.list(EntityKind.RESOURCE)
    return [r for r in resources if r.industry is None or r.industry == industry]


@router.get("/{resource_id}", response_model=Resource)
async def get_resource(resource_id: int, store: EntityStore = Depends(get_store)):
    resource = await store.get(EntityKind.RESOURCE, resource_id)
    if not resource:
        raise NotFoundError("Resource", resource_id)
    return resource
