from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple


def payload_point(payload: Mapping[str, Any]) -> Optional[Tuple[float, float]]:
    """Return (x, y) from an input event payload, or None when unusable."""
    x = payload.get('x')
    y = payload.get('y')
    if x is None or y is None:
        return None
    try:
        return float(x), float(y)
    except (TypeError, ValueError):
        return None
