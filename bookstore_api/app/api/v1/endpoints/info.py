"""
Root information endpoint.

Returns a static description of the service and the routes it
exposes, so that a client (or a person with a browser) can discover
the API without reading the OpenAPI document.
"""

from typing import Any, Dict

from fastapi import APIRouter

from bookstore_api.app.core.config import settings

router = APIRouter()

ENTITIES = ("books", "authors", "categories")


def describe_endpoints(prefix: str = "") -> Dict[str, Dict[str, str]]:
    """Map each entity to its five operations, e.g. ``GET /books/{id}``."""
    endpoints: Dict[str, Dict[str, str]] = {}
    for entity in ENTITIES:
        base = f"{prefix}/{entity}"
        endpoints[entity] = {
            "getAll": f"GET {base}",
            "getOne": f"GET {base}/{{id}}",
            "create": f"POST {base}",
            "update": f"PUT {base}/{{id}}",
            "delete": f"DELETE {base}/{{id}}",
        }
    return endpoints


@router.get("/", response_model=Dict[str, Any])
async def get_info() -> Dict[str, Any]:
    return {
        "message": settings.project_name,
        "version": settings.api_version,
        "endpoints": describe_endpoints(settings.api_prefix.rstrip("/")),
    }
