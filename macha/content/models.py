"""Pydantic models for static dashboard content."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Content(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class MetricDefinition(_Content):
    """Tooltip text for a dashboard metric."""

    title: str
    description: str


class SourceShare(_Content):
    """One slice of a reach or engagement source breakdown."""

    name: str
    value: float = Field(..., ge=0, le=100, description="Share in percent")
    color: str = ""


class AIAnalysis(_Content):
    """Narrative analysis block shown next to campaign performance."""

    summary: str
    insights: list[str] = Field(default_factory=list)
    recommendation: str = ""
    generated_at: str = ""


class StaticContent(_Content):
    """Static dashboard content. None of it is computed from campaign data."""

    ai_analysis: AIAnalysis
    metric_definitions: dict[str, MetricDefinition] = Field(default_factory=dict)
    reach_source: list[SourceShare] = Field(default_factory=list)
    engagement_source: list[SourceShare] = Field(default_factory=list)
