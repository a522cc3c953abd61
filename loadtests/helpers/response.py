"""Readable failure messages for Locust.

Two error bodies come back from the bookstore API:

- pydantic (422): {"detail": [{"loc": [...], "msg": "..."}]}
- domain errors: {"error": "msg"} or {"error": {"field": ["msg", ...]}}
"""


def _join(messages):
    return ", ".join(map(str, messages)) if isinstance(messages, list) else str(messages)


def extract_error_detail(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return (getattr(response, "text", "") or "(empty response body)")[:300]

    if isinstance(body.get("detail"), list):
        return " | ".join(
            f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg', err)}" for err in body["detail"]
        )

    error = body.get("error")
    if isinstance(error, dict):
        return " | ".join(f"{field}: {_join(messages)}" for field, messages in error.items())
    if error is not None:
        return str(error)

    return str(body)[:300]
