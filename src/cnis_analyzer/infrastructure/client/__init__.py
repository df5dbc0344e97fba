"""Client for the remote analysis service."""

from cnis_analyzer.infrastructure.client.analysis_client import (
    AnalysisClient,
    analyze_cnis,
    parse_analysis_response,
)

__all__ = [
    "AnalysisClient",
    "analyze_cnis",
    "parse_analysis_response",
]
