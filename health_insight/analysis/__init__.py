from health_insight.analysis.analyzer import ReportAnalyzer, build_analyzer
from health_insight.analysis.exceptions import AnalysisError, AnalysisErrorCode
from health_insight.analysis.models import AnalysisRequest, AnalysisResponse

__all__ = [
    "AnalysisError",
    "AnalysisErrorCode",
    "AnalysisRequest",
    "AnalysisResponse",
    "ReportAnalyzer",
    "build_analyzer",
]
