"""Identifiers of the scenes and the function that builds them."""

from __future__ import annotations

import enum
from typing import Union

from playdeck.menu import Menu
from playdeck.placeholder import EscapeGame, PlaceholderGame
from playdeck.scene import Host, Scene
from playdeck.tabletop import TableGame


class GameId(enum.IntEnum):
    """Scene identifiers; the menu sits apart from the sixteen game slots."""

    GAME00 = 0
    GAME01 = 1
    GAME02 = 2
    GAME03 = 3
    GAME04 = 4
    GAME05 = 5
    GAME06 = 6
    GAME07 = 7
    GAME08 = 8
    GAME09 = 9
    GAME10 = 10
    GAME11 = 11
    GAME12 = 12
    GAME13 = 13
    GAME14 = 14
    GAME15 = 15
    MENU = 100


def create_scene(game_id: Union[GameId, int], host: Host) -> Scene:
    """Build the scene for an identifier; unknown identifiers raise ValueError."""
    game_id = GameId(game_id)
    if game_id is GameId.MENU:
        return Menu(host, host.assets_dir)
    if game_id is GameId.GAME02:
        return TableGame(host)
    if game_id is GameId.GAME15:
        return EscapeGame(host)
    return PlaceholderGame(host, game_id.name)