"""JSON envelopes returned to callers of the analysis pipeline."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..exceptions import TextLensError
from .result import AnalysisResult

logger = logging.getLogger(__name__)

SERVER_ERROR_STATUS = 500


def build_success_response(result: AnalysisResult) -> Dict[str, Any]:
    return {"success": True, "data": result.to_dict()}


def build_error_response(exc: TextLensError) -> Dict[str, Any]:
    """Describe ``exc`` as a failed response carrying its HTTP-style status.

    Client errors (status below 500) are logged as warnings, everything else
    as errors.
    """

    status = int(getattr(exc, "status_code", SERVER_ERROR_STATUS))
    level = logging.ERROR if status >= SERVER_ERROR_STATUS else logging.WARNING
    logger.log(level, "%s (status %d): %s", type(exc).__name__, status, exc, exc_info=exc)
    return {"success": False, "error": str(exc), "status": status}


__all__ = ["build_error_response", "build_success_response"]
