from padelpairing.pairing.balanced import (
    create_balanced_pairs,
    required_top_count,
    split_top_bottom,
)
from padelpairing.pairing.captain_draft import CaptainDraft

__all__ = [
    "CaptainDraft",
    "create_balanced_pairs",
    "required_top_count",
    "split_top_bottom",
]
