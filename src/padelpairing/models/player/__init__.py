from padelpairing.models.player.base_player import Player, create_player

__all__ = [
    "Player",
    "create_player",
]
