from padelpairing.models.pairing.pair import Pair
from padelpairing.models.pairing.pairing_result import BalancedPairingResult

__all__ = [
    "Pair",
    "BalancedPairingResult",
]
