"""Run identity hashing for PageRank configs."""

import hashlib
import json
from dataclasses import asdict

from walkrank.config.experiment import PagerankConfig

# Labels only; changing them does not change the counts a run produces.
_LABEL_FIELDS = ("description",)


def config_hash(config: PagerankConfig) -> str:
    """Short identifier of the parameters that determine traversal counts.

    Two configs that differ only in description share a hash, so the hash
    identifies what was run rather than how it was labelled. Recorded on
    CalculationStats and in run logs.

    Returns:
        First 16 hex characters of a SHA-256 over the canonical JSON form.
    """
    params = {k: v for k, v in asdict(config).items() if k not in _LABEL_FIELDS}
    canonical = json.dumps(params, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]
