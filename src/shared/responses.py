import json


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def http_response(status_code: int, body: dict) -> dict:
    headers = {"Content-Type": "application/json", **CORS_HEADERS}
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": json.dumps(body)
    }


def get_method(event: dict) -> str | None:
    """Payload format 2.0 (requestContext.http.method) and 1.0 (httpMethod)."""
    ctx = event.get("requestContext") or {}
    return (
        ctx.get("http", {}).get("method")
        or ctx.get("httpMethod")
        or event.get("httpMethod")
    )


def body_json(event: dict) -> dict:
    body = event.get("body")
    if body is None:
        return {}
    if isinstance(body, str):
        try:
            parsed = json.loads(body) if body else {}
        except json.JSONDecodeError:
            return {}
        return parsed if isinstance(parsed, dict) else {}
    return body if isinstance(body, dict) else {}
