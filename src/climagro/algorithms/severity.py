"""
Severity classification.

Each alert kind has an ordered breakpoint table. The first breakpoint whose
limit the magnitude strictly exceeds gives the tier; anything else falls to
the kind's base tier.
"""

from typing import Dict, Mapping, Sequence, Tuple

from ..models.alert import AlertKind, Severity

# (limit, tier) pairs, highest limit first
Breakpoints = Sequence[Tuple[int, Severity]]

DEFAULT_BREAKPOINTS: Dict[AlertKind, Breakpoints] = {
    AlertKind.EXTREME_HEAT: ((10, Severity.CRITICAL), (5, Severity.HIGH)),
    AlertKind.EXTREME_COLD: ((5, Severity.HIGH),),
    AlertKind.FROST_RISK: ((10, Severity.HIGH),),
    AlertKind.HEAVY_RAIN: ((10, Severity.HIGH),),
    AlertKind.DROUGHT: ((60, Severity.CRITICAL), (45, Severity.HIGH)),
}

BASE_SEVERITY = Severity.MEDIUM


def classify_severity(
    kind: AlertKind,
    magnitude: int,
    table: Mapping[AlertKind, Breakpoints] = DEFAULT_BREAKPOINTS,
    base: Severity = BASE_SEVERITY
) -> Severity:
    """
    Map an event count (or dry streak length) to a severity tier.

    Args:
        kind: Alert kind
        magnitude: Full matched count, or the max dry streak for drought
        table: Breakpoint table per kind
        base: Tier used when no breakpoint is exceeded

    Returns:
        Severity tier
    """
    for limit, tier in table.get(kind, ()):
        if magnitude > limit:
            return tier
    return base
