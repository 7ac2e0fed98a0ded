import json
from typing import Any, List, Optional

from fastapi.responses import JSONResponse


class UnicodeJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False).encode("utf-8")


def success(data: Any = None, status_code: int = 200, message: Optional[str] = None) -> UnicodeJSONResponse:
    body = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return UnicodeJSONResponse(body, status_code=status_code)


def failure(
    code: str,
    message: str,
    status_code: int,
    details: Optional[List[dict]] = None,
    headers: Optional[dict] = None,
) -> UnicodeJSONResponse:
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return UnicodeJSONResponse({"success": False, "error": error}, status_code=status_code, headers=headers)
