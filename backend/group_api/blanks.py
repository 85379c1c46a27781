"""Strip blank string fields from request bodies.

    {"group": {"name": "", "description": "foo"}} -> {"group": {"description": "foo"}}
"""
from typing import Any

from fastapi import Request


def remove_blank_fields(data: Any) -> Any:
    """Return a copy of `data` without mapping keys whose value is ``""``.

    Nested mappings are cleaned recursively, including mappings inside lists.
    List items themselves are never dropped.
    """
    if isinstance(data, dict):
        return {key: remove_blank_fields(value) for key, value in data.items() if value != ""}
    if isinstance(data, list):
        return [remove_blank_fields(item) for item in data]
    return data


async def remove_blanks(request: Request) -> Any:
    """Dependency yielding the JSON request body with blank fields removed.

    An empty or undecodable body yields None; the route rejects it when it
    validates the payload.
    """
    try:
        body = await request.json()
    except ValueError:
        return None
    return remove_blank_fields(body)
