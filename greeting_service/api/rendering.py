"""JSON rendering shared by endpoint handlers."""

import logging

from fastapi import status
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel

INTERNAL_ERROR_BODY = "Internal server error"


def api_render_json(payload: BaseModel, logger: logging.Logger, payload_label: str) -> Response:
    """Serialize a response model into an HTTP 200 JSON response.

    Encoding failures are logged and answered with HTTP 500 instead of being
    raised to the framework.

    Args:
        payload: Response model to serialize.
        logger: Logger receiving encoding failures.
        payload_label: Short name used in the failure log line.

    Returns:
        Response: JSON response, or plain-text HTTP 500 on encoding failure.
    """

    try:
        body = payload.model_dump_json()
    except (TypeError, ValueError) as error:
        logger.error("Error encoding %s response: %s", payload_label, error)
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(content=body, media_type="application/json", status_code=status.HTTP_200_OK)
