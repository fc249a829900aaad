"""Static dashboard content: AI analysis narrative, metric tooltips, source breakdowns."""

from macha.content.loader import get_static_content, load_static_content
from macha.content.models import AIAnalysis, MetricDefinition, SourceShare, StaticContent

__all__ = [
    "AIAnalysis",
    "MetricDefinition",
    "SourceShare",
    "StaticContent",
    "get_static_content",
    "load_static_content",
]
