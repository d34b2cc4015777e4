"""Report assembly around the local text statistics."""

from .reading_level import GRADE_BANDS, GradeBand, ReadingLevel, grade_band, grade_percentage, parse_reading_level
from .reply import parse_model_reply
from .response import build_error_response, build_success_response
from .result import AnalysisResult, TextStatistics, analyze, build_analysis_result, compute_statistics
from .validation import validate_input_text

__all__ = [
    "AnalysisResult",
    "GRADE_BANDS",
    "GradeBand",
    "ReadingLevel",
    "TextStatistics",
    "analyze",
    "build_analysis_result",
    "build_error_response",
    "build_success_response",
    "compute_statistics",
    "grade_band",
    "grade_percentage",
    "parse_model_reply",
    "parse_reading_level",
    "validate_input_text",
]
