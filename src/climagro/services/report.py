"""
Plain-text rendering of summaries and alerts for the command line.
"""

from typing import Dict, List

from ..models.alert import AnalysisResult
from ..models.climate import ClimateData, ParameterSummary

RECOMMENDATIONS = [
    "Monitor irrigation systems during dry periods",
    "Apply frost protection when needed",
    "Adjust management practices to extreme conditions",
    "Consider more resistant varieties for high-risk areas",
]


def render_summaries(data: ClimateData, summaries: Dict[str, ParameterSummary]) -> str:
    lines = [
        f"Location: {data.latitude:.4f}°, {data.longitude:.4f}°",
        f"Period: {data.start_date} to {data.end_date}",
        "",
    ]
    for summary in summaries.values():
        if summary.count == 0:
            lines.append(f"{summary.name}: N/A")
            continue
        lines.append(
            f"{summary.name}: avg {summary.average:.2f} {summary.unit} "
            f"(max {summary.maximum:.2f}, min {summary.minimum:.2f}, {summary.count} days)"
        )
    return "\n".join(lines)


def render_alerts(result: AnalysisResult) -> str:
    """
    Render alerts as text.

    Each alert shows its severity, title, description and the first flagged
    dates followed by "+N more" when the list was truncated.
    """
    if not result.alerts:
        return (
            "No extreme climate events detected.\n"
            "Conditions are within normal parameters for agriculture."
        )

    lines: List[str] = ["Climate alerts detected:", ""]
    for alert in result.alerts:
        lines.append(f"[{alert.severity.value.upper()}] {alert.title}")
        lines.append(f"  {alert.description}")
        if alert.matched_dates:
            dates = ", ".join(alert.matched_dates)
            if alert.more_count:
                dates += f" +{alert.more_count} more"
            lines.append(f"  First occurrences: {dates}")
        lines.append("")

    if result.skipped_points:
        lines.append(f"({result.skipped_points} malformed data points were skipped)")
        lines.append("")

    lines.append("Recommendations for coffee growing:")
    lines.extend(f"  - {item}" for item in RECOMMENDATIONS)
    return "\n".join(lines)
