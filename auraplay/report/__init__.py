"""
Report Module.

Qualitative profile summary and the timestamped adaptation report.
"""

from auraplay.report.profile_summary import ProfileSummary, summarize_profile
from auraplay.report.report_builder import AdaptationReport, build_report, iso_timestamp

__all__ = [
    "ProfileSummary",
    "summarize_profile",
    "AdaptationReport",
    "build_report",
    "iso_timestamp",
]
