"""
Canonical JSON rendering of form states and views.

Output is identical for equal inputs regardless of dict insertion order.
"""

import json
import math
from typing import Any

from .state import FieldEntry, FormState
from .view import DerivedView


def canonicalize(obj: Any) -> Any:
    """
    Convert states, views and nested dict/list/tuple/set values to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples converted to lists, sets to sorted lists
    - NaN and infinities rendered as strings
    - FormState, FieldEntry and DerivedView expanded to dicts
    """
    if isinstance(obj, DerivedView):
        return canonicalize(obj.to_dict())
    if isinstance(obj, FormState):
        return canonicalize(obj.fields)
    if isinstance(obj, FieldEntry):
        return {"errors": list(obj.errors), "value": canonicalize(obj.value)}
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted(canonicalize(x) for x in obj)
    if isinstance(obj, float) and not math.isfinite(obj):
        return str(obj)
    return obj


def canonical_json_str(obj: Any) -> str:
    """Deterministic compact JSON string."""
    canon = canonicalize(obj)
    return json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
