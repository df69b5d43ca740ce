"""
Canonical JSON Serialization

Deterministic JSON with sorted keys, used to fingerprint problem instances
so that two runs can confirm they evaluated the same function.
"""

import hashlib
import json
from typing import Any

import numpy as np


def _default(obj: Any) -> Any:
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    return str(obj)


def canonical_dumps(obj: Any, indent: int = None) -> str:
    """
    Canonical JSON serialization with sorted keys.

    Args:
        obj: Object to serialize (numpy arrays and scalars are converted)
        indent: Indentation level (None for compact)

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':') if indent is None else None,
        indent=indent,
        default=_default
    )


def canonical_hash(obj: Any) -> str:
    """Hex digest of the SHA-256 hash of canonical JSON."""
    return hashlib.sha256(canonical_dumps(obj).encode()).hexdigest()
