"""
Shared dependencies for the v1 endpoints.

``request_fields`` reads the request body the way existing clients
expect: only a JSON body is looked at, and only a JSON object carries
fields.  Form posts, plain text, arrays and empty bodies all read as
``{}``, so creating or updating with them still succeeds.
"""

import json
from typing import Any, Dict

from fastapi import HTTPException, Request, status


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def request_fields(request: Request) -> Dict[str, Any]:
    """Return the JSON object sent as the body, or ``{}``.

    A body that claims to be JSON but does not parse is answered with
    400, like any JSON body parser would.
    """
    if not _is_json(request.headers.get("content-type", "")):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed JSON body") from exc
    return body if isinstance(body, dict) else {}
