"""Usage math for plane parts: derived usage percentage and the maintenance-alert rule.

Pure functions only; no database access. The alert query in PlanePartRepository
applies the same comparison in SQL.
"""

# Threshold used when the caller does not supply one.
DEFAULT_ALERT_THRESHOLD = 80.0


def usage_percent(usage_hours: float, usage_limit_hours: float) -> float:
    """
    Return usage_hours / usage_limit_hours * 100.

    A non-positive limit yields 0.0 rather than dividing.
    """
    if usage_limit_hours <= 0:
        return 0.0
    return usage_hours / usage_limit_hours * 100


def needs_maintenance(
    usage_hours: float,
    usage_limit_hours: float,
    threshold_percent: float = DEFAULT_ALERT_THRESHOLD,
) -> bool:
    """
    True when the part's usage percentage is at or above the threshold (inclusive).

    Compared as usage_hours * 100 >= threshold * limit so a part at exactly N% meets an N% threshold.
    """
    if usage_limit_hours <= 0:
        return threshold_percent <= 0
    return usage_hours * 100 >= threshold_percent * usage_limit_hours


def exceeds_limit(usage_hours: float, usage_limit_hours: float) -> bool:
    """True when a usage update would put the part over its certified limit."""
    return usage_hours > usage_limit_hours
