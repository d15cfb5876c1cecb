"""
Vector store admin endpoints.

Routes: GET /fetchCollections

Dependencies: ragdemo.boundary.vdb.collection_inspector
System role: Diagnostic pass-through to the Chroma admin API
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ragdemo.api.deps import get_collection_inspector
from ragdemo.boundary.vdb.collection_inspector import CollectionInspector

router = APIRouter(tags=["collections"], default_response_class=PlainTextResponse)


@router.get("/fetchCollections")
def fetch_collections(
    inspector: CollectionInspector = Depends(get_collection_inspector),
) -> str:
    """Raw Chroma collections listing."""
    return inspector.list_collections()
