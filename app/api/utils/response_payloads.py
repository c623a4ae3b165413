from typing import Any, Dict, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(status_code: int, message: Optional[str] = None, data: Any = None):
    """
    Create a standardized JSON response for successful requests.

    Args:
        status_code (int): HTTP status code to return (e.g. 200, 201).
        message (Optional[str]): Human-readable description of the result.
            Omitted from the body when not given.
        data (Any): Optional payload (object or list). Omitted when None.

    Returns:
        JSONResponse: Contains:
            - success: true
            - message: same message passed (when given)
            - data: payload (when given)
    """

    response_data: Dict[str, Any] = {"success": True}
    if message is not None:
        response_data["message"] = message
    if data is not None:
        response_data["data"] = data

    return JSONResponse(status_code=status_code, content=jsonable_encoder(response_data))


def error_response(
    *,
    status_code: int,
    message: str,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    """
    Create a standardized JSON response for failed requests.

    Args:
        status_code (int): HTTP status code representing the error (e.g. 400, 404, 500).
        message (str): High-level human-readable error description.
        errors (Optional[List[Dict[str, Any]]]): Optional field-level validation errors
            in the form:
                [
                    {"field": "email", "message": "...", "value": "...", "location": "body"},
                    ...
                ]

    Returns:
        JSONResponse: Standard error structure:
            {
                "success": false,
                "message": "<message>",
                "errors": [...]        # only when errors were given
            }
    """

    response_data: Dict[str, Any] = {"success": False, "message": message}
    if errors is not None:
        response_data["errors"] = errors

    return JSONResponse(status_code=status_code, content=jsonable_encoder(response_data))
