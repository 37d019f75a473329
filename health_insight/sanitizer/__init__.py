from health_insight.sanitizer.models import AnalysisOutcome, Classification, Parameter
from health_insight.sanitizer.sanitizer import OutputSanitizer

__all__ = ["AnalysisOutcome", "Classification", "OutputSanitizer", "Parameter"]
