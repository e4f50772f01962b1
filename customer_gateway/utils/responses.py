"""
Response helpers
"""

from typing import Dict, Optional

from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Build the {"error": ...} body every failure path returns"""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)
