from starlette.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSON response with an explicit charset, so Vietnamese status labels render as-is."""

    media_type = "application/json; charset=utf-8"
