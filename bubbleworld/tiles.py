"""Tile identifiers, their sheet rectangles and their collision classes."""

from __future__ import annotations

from enum import IntEnum

from bubbleworld.sprite import Rect


class Tile(IntEnum):
    """Tile identifiers as stored in level maps."""

    EMPTY = -1
    AIR = 0

    BLOCKWITH1 = 1
    BLOCKWITHOUT1 = 2
    CORNER = 3
    SHADOW = 4
    SHADOW2 = 5
    SHADOW3 = 6
    SHADOW4 = 7
    SHADOW5 = 8
    SHADOW6 = 9
    SHADOW7 = 10
    PLATFORMBASIC = 11
    PLATFORMBEGINNING = 12
    PLATFORMEND = 13
    PLATFORMCORNERRIGHT = 16
    PLATFORMMIDDLESTART = 17
    PLATFORMMIDDLEFINISH = 18
    SHADOWDOWN = 19
    SHADOWOTRA = 20
    SHADOWOTRA2 = 21
    LADDER_L = 22
    LADDER_R = 23
    LADDER_TOP_L = 24
    LADDER_TOP_R = 25
    LOCK_RED = 30
    LOCK_YELLOW = 31
    LASER_L = 40
    LASER_R = 41
    FLOOR = 42
    FLOORSTART = 43

    DOOR = 50
    OBJECT = 59
    APPLE = 60
    BANANA = 61
    CHERRY = 62
    GRAPE = 63
    LEMON = 64
    ORANGE_OBJ = 65
    PEAR = 66
    WATERMELON = 67
    BLUE_CANDY = 68
    CAKE = 69
    DONUT = 70
    HAMBURGUER = 71
    HOT_DOG = 72
    ICE_CREAM = 73
    PINK_CANDY = 74
    PIZZA = 75
    POPSICLE = 76
    SUSHI = 77
    YELLOW_CANDY = 78
    MIQUEL = 79
    LASER = 80
    LASER_FRAME0 = 81
    LASER_FRAME1 = 82
    LASER_FRAME2 = 83

    PLAYER = 100
    BUBBLE = 101
    BUBBLE2 = 102
    ZENCHAN = 103
    BANEBOU = 104
    DRUNK = 105
    PLAYER2 = 106
    DRUNKR = 107
    SD = 108

    BLOCKWITH3 = 150
    BLOCKWITHOUT3 = 151
    PLATFORMLVL2 = 152
    PLATFORMCORNERRIGHTLVL2 = 153
    PLATFORMCORNERLEFTLVL2 = 154
    FLOORLVL2 = 155
    FLOORLVL2RIGHT = 156
    FLOORLVL2LEFT = 157
    CORNERPLATFORMLVL2 = 158
    CORNERFLOORLVL2 = 159
    HALFWALLRIGHTLVL2 = 160
    HALWALLLEFTLVL2 = 161
    SHADOWLVL2 = 162
    LILSHADOWLVL2 = 163
    CORNERSHADOWLVL2 = 164
    LILSHADOWRIGHTLVL2 = 165
    FLOORSHADOWBOTTOMLVL2 = 166
    PLATFORMSHADOWWALLLVL2 = 167
    PLATFORMDEDOS = 168
    ASHADOWLVL2 = 169
    ULTIMAPLATFORMLVL2 = 170
    DEBUG_WARP_1 = 171
    DEBUG_WARP_2 = 172
    DEBUG_CEILINGLVL1 = 173

    BLOCKWITH30 = 174
    BLOCKWITHOUT30 = 175
    CORNERFLOOR30 = 176
    FLOOR30 = 177
    FLOOR30L = 178
    FLOOR30R = 179
    FLOOR30WSHADOWL = 180
    FLOOR30WSHADOWR = 181
    WALLNOSHADE30 = 182
    WALLWSHADETOP30 = 183
    WALLWSHADE30 = 184
    WALLSHADE_30 = 185
    WALLSHADETOP_30 = 186
    PLATSHADE30FIRST = 187
    PLATSHADE30 = 188
    PLATSHADE30CORNER = 189
    PLAT2SHADE30FIRST = 190
    PLAT2SHADE30LAST = 191
    DEBUG_WARP_30 = 192
    DEBUG_CEILINGLVL30 = 193
    DEBUG30L = 194
    DEBUG30R = 195

    BLOCKWALL4 = 196
    BLOCKWALL4NUMBER = 197
    CORNER_PLATAFORM4 = 199
    PLATAFORM_SHADOW4 = 200
    WALL_SHADOW4 = 201
    WALL_PLATAFORM4 = 202
    PLATAFORM4 = 203
    CORNER_SHADOW4 = 204
    BOTTOM_SHADW4 = 205
    DEBUGLVL4 = 206

    YESYESYESNO = 207
    WALLSHADEDRUNK = 208
    NOYESNONO = 209
    NOYESNOYES = 210
    NOYESYESYES = 211
    YESNOYESNO = 212
    DRUNK_CARTEL = 213
    THAT_ONE = 214
    YESYESNOYES = 215
    YESNONOYES2 = 216
    FINALY = 217

    BLOCK100 = 218
    BLOCKNO100 = 219
    CORNERARRIBAIZQ = 220
    CORNERABAJOIZQ = 221
    NONONOYES100 = 222
    NONOYESNO100 = 223
    PLAT100 = 224
    NOYESNONO100 = 225
    YESNONONO100 = 226
    CEILING100 = 227
    FLOOR100 = 228
    SHADEW100 = 229
    SHADE100 = 230
    SHADE2100 = 231
    SHADE3100 = 232

    DOT = 233

    STATIC_FIRST = BLOCKWITH1
    STATIC_LAST = BLOCKWITHOUT1
    SOLID_FIRST = PLATFORMBASIC
    SOLID_LAST = PLATFORMBASIC
    HALF_FIRST = PLATFORMBEGINNING
    HALF_LAST = PLATFORMBEGINNING
    FLOOR_FIRST = FLOOR
    FLOOR_LAST = FLOORSTART
    SPECIAL_FIRST = DOOR
    SPECIAL_LAST = LASER
    ENTITY_FIRST = PLAYER
    ENTITY_LAST = PLAYER
    LASER_FIRST = LASER
    LASER_LAST = LASER_FRAME2


# Sheet positions as (column, row) in tiles, optionally with a size in tiles.
_SHEET: dict[Tile, tuple[int, ...]] = {
    Tile.BLOCKWITH1: (0, 1),
    Tile.BLOCKWITHOUT1: (0, 2),
    Tile.CORNER: (1, 1),
    Tile.PLATFORMBASIC: (2, 1),
    Tile.PLATFORMBEGINNING: (3, 6),
    Tile.PLATFORMEND: (12, 6),
    Tile.PLATFORMCORNERRIGHT: (14, 6),
    Tile.PLATFORMMIDDLESTART: (3, 8),
    Tile.PLATFORMMIDDLEFINISH: (12, 8),
    Tile.SHADOW: (2, 6),
    Tile.SHADOW2: (1, 3),
    Tile.SHADOW3: (2, 9),
    Tile.SHADOW4: (14, 9),
    Tile.SHADOW5: (12, 9),
    Tile.SHADOW6: (1, 9),
    Tile.SHADOW7: (3, 9),
    Tile.SHADOWDOWN: (4, 9),
    Tile.SHADOWOTRA: (12, 9),
    Tile.SHADOWOTRA2: (2, 8),
    Tile.FLOOR: (3, 13),
    Tile.FLOORSTART: (1, 13),
    Tile.LADDER_L: (2, 2),
    Tile.LADDER_R: (3, 2),
    Tile.LADDER_TOP_L: (4, 2),
    Tile.LADDER_TOP_R: (5, 2),
    Tile.LOCK_RED: (6, 2),
    Tile.LOCK_YELLOW: (7, 2),
    Tile.LASER_L: (0, 6),
    Tile.LASER_R: (4, 6),
    Tile.LASER_FRAME0: (1, 6),
    Tile.LASER_FRAME1: (2, 6),
    Tile.LASER_FRAME2: (3, 6),
    Tile.BLOCKWITH3: (0, 15),
    Tile.BLOCKWITHOUT3: (0, 16),
    Tile.PLATFORMLVL2: (2, 15),
    Tile.PLATFORMCORNERRIGHTLVL2: (4, 15),
    Tile.PLATFORMCORNERLEFTLVL2: (6, 15),
    Tile.FLOORLVL2: (3, 17),
    Tile.FLOORLVL2RIGHT: (2, 17),
    Tile.FLOORLVL2LEFT: (6, 17),
    Tile.CORNERPLATFORMLVL2: (1, 15),
    Tile.CORNERFLOORLVL2: (3, 22),
    Tile.HALFWALLRIGHTLVL2: (2, 18),
    Tile.HALWALLLEFTLVL2: (13, 18),
    Tile.PLATFORMDEDOS: (9, 20),
    Tile.ULTIMAPLATFORMLVL2: (3, 25),
    Tile.SHADOWLVL2: (1, 16),
    Tile.LILSHADOWLVL2: (6, 18),
    Tile.CORNERSHADOWLVL2: (3, 18),
    Tile.LILSHADOWRIGHTLVL2: (9, 18),
    Tile.FLOORSHADOWBOTTOMLVL2: (5, 18),
    Tile.PLATFORMSHADOWWALLLVL2: (7, 20),
    Tile.ASHADOWLVL2: (6, 25),
    Tile.DEBUG_WARP_1: (2, 15),
    Tile.DEBUG_WARP_2: (6, 15),
    Tile.DEBUG_CEILINGLVL1: (2, 1),
    Tile.BLOCKWITH30: (0, 29),
    Tile.BLOCKWITHOUT30: (0, 30),
    Tile.CORNERFLOOR30: (1, 41),
    Tile.FLOOR30: (2, 41),
    Tile.FLOOR30L: (4, 41),
    Tile.FLOOR30R: (6, 41),
    Tile.FLOOR30WSHADOWL: (2, 33),
    Tile.FLOOR30WSHADOWR: (4, 33),
    Tile.WALLNOSHADE30: (4, 31),
    Tile.WALLWSHADETOP30: (2, 31),
    Tile.WALLWSHADE30: (2, 32),
    Tile.WALLSHADE_30: (1, 30),
    Tile.WALLSHADETOP_30: (5, 31),
    Tile.PLATSHADE30FIRST: (2, 34),
    Tile.PLATSHADE30: (3, 34),
    Tile.PLATSHADE30CORNER: (5, 34),
    Tile.PLAT2SHADE30FIRST: (6, 34),
    Tile.PLAT2SHADE30LAST: (9, 34),
    Tile.DEBUG_WARP_30: (1, 29),
    Tile.DEBUG_CEILINGLVL30: (2, 29),
    Tile.DEBUG30L: (4, 29),
    Tile.DEBUG30R: (6, 29),
    Tile.BLOCKWALL4: (0, 44),
    Tile.BLOCKWALL4NUMBER: (0, 43),
    Tile.CORNER_PLATAFORM4: (1, 43),
    Tile.PLATAFORM_SHADOW4: (2, 43),
    Tile.DEBUGLVL4: (2, 43),
    Tile.WALL_SHADOW4: (1, 44),
    Tile.WALL_PLATAFORM4: (1, 45),
    Tile.PLATAFORM4: (2, 45),
    Tile.CORNER_SHADOW4: (1, 46),
    Tile.BOTTOM_SHADW4: (2, 46),
    Tile.DRUNK_CARTEL: (1, 56, 13, 3),
    Tile.YESYESYESNO: (1, 57),
    Tile.WALLSHADEDRUNK: (1, 58),
    Tile.NOYESNOYES: (2, 58),
    Tile.NOYESNONO: (2, 59),
    Tile.THAT_ONE: (3, 58),
    Tile.NOYESYESYES: (3, 59),
    Tile.YESNOYESNO: (5, 58),
    Tile.YESYESNOYES: (5, 57),
    Tile.YESNONOYES2: (10, 58),
    Tile.FINALY: (13, 57),
    Tile.BLOCK100: (16, 1),
    Tile.BLOCKNO100: (16, 2),
    Tile.SHADEW100: (17, 2),
    Tile.CORNERARRIBAIZQ: (17, 1),
    Tile.CORNERABAJOIZQ: (17, 13),
    Tile.FLOOR100: (18, 13),
    Tile.CEILING100: (18, 1),
    Tile.NONONOYES100: (20, 3),
    Tile.SHADE100: (20, 4),
    Tile.SHADE2100: (21, 4),
    Tile.NONOYESNO100: (21, 3),
    Tile.PLAT100: (19, 6),
    Tile.NOYESNONO100: (23, 6),
    Tile.YESNONONO100: (24, 6),
    Tile.SHADE3100: (29, 6),
}


def tile_rect(tile: int, tile_size: int) -> Rect | None:
    """The sheet rectangle of a tile, or None for tiles with no image."""
    try:
        entry = _SHEET[Tile(tile)]
    except (KeyError, ValueError):
        return None
    column, row, *size = entry
    width, height = size or (1, 1)
    return Rect(column * tile_size, row * tile_size, width * tile_size, height * tile_size)


_EXTRA_STATIC = frozenset({
    Tile.BLOCKWITH3, Tile.BLOCKWITHOUT3, Tile.BLOCKWITH30, Tile.BLOCKWITHOUT30,
    Tile.BLOCKWALL4, Tile.BLOCKWALL4NUMBER, Tile.BLOCKNO100, Tile.BLOCK100,
})
_EXTRA_SOLID = frozenset({
    Tile.CORNER, Tile.PLATFORMCORNERRIGHT, Tile.PLATFORMLVL2, Tile.CORNERPLATFORMLVL2,
    Tile.PLATFORMDEDOS, Tile.CORNER_PLATAFORM4, Tile.PLATAFORM_SHADOW4, Tile.PLAT100,
})
_EXTRA_HALF_RIGHT = frozenset({Tile.PLATFORMCORNERLEFTLVL2, Tile.NOYESNONO100})
_HALF_RIGHT_ALT = frozenset({Tile.PLATFORMMIDDLEFINISH, Tile.FLOORLVL2LEFT, Tile.FLOOR30L})
_HALF_LEFT = frozenset({Tile.PLATFORMEND, Tile.ULTIMAPLATFORMLVL2})
_HALF_LEFT_ALT = frozenset({
    Tile.PLATFORMMIDDLESTART, Tile.FLOORLVL2RIGHT, Tile.FLOOR30R, Tile.NONONOYES100,
})
_HALF_WALL_RIGHT = frozenset({
    Tile.HALFWALLRIGHTLVL2, Tile.WALLNOSHADE30, Tile.WALLWSHADE30, Tile.WALLWSHADETOP30,
})
_EXTRA_FLOOR = frozenset({
    Tile.FLOORLVL2, Tile.CORNERFLOORLVL2, Tile.FLOOR30, Tile.CORNERFLOOR30,
    Tile.FLOOR30WSHADOWL, Tile.FLOOR30WSHADOWR, Tile.PLATAFORM4, Tile.WALL_PLATAFORM4,
    Tile.FLOOR100, Tile.CORNERABAJOIZQ,
})
_EXTRA_FLOOR_OR_CEILING = frozenset({
    Tile.FLOORLVL2, Tile.CORNERFLOORLVL2, Tile.PLATFORMBASIC, Tile.PLATFORMLVL2,
    Tile.CORNER, Tile.PLATFORMCORNERRIGHT, Tile.PLATFORMCORNERLEFTLVL2,
    Tile.CORNERPLATFORMLVL2, Tile.FLOOR30, Tile.CORNERFLOOR30,
})
_LADDER_TOPS = frozenset({Tile.LADDER_TOP_L, Tile.LADDER_TOP_R})


def is_static(tile: int) -> bool:
    """Solid wall blocks that stop horizontal movement."""
    return Tile.STATIC_FIRST <= tile <= Tile.STATIC_LAST or tile in _EXTRA_STATIC


def is_solid(tile: int) -> bool:
    """Platforms that can be stood on."""
    return Tile.SOLID_FIRST <= tile <= Tile.SOLID_LAST or tile in _EXTRA_SOLID


def is_laser(tile: int) -> bool:
    return Tile.LASER_FIRST <= tile <= Tile.LASER_LAST


def is_lock(tile: int) -> bool:
    return tile == Tile.LOCK_RED


def is_half_cube_right(tile: int) -> bool:
    return Tile.HALF_FIRST <= tile <= Tile.HALF_LAST or tile in _EXTRA_HALF_RIGHT


def is_half_cube_right_alt(tile: int) -> bool:
    return tile in _HALF_RIGHT_ALT


def is_half_cube_left(tile: int) -> bool:
    return tile in _HALF_LEFT


def is_half_cube_left_alt(tile: int) -> bool:
    return tile in _HALF_LEFT_ALT


def is_half_wall_left(tile: int) -> bool:
    return tile == Tile.HALWALLLEFTLVL2


def is_half_wall_right(tile: int) -> bool:
    return tile in _HALF_WALL_RIGHT


def is_air(tile: int) -> bool:
    return tile == Tile.AIR


def is_floor(tile: int) -> bool:
    return Tile.FLOOR_FIRST <= tile <= Tile.FLOOR_LAST or tile in _EXTRA_FLOOR


def is_floor_or_ceiling(tile: int) -> bool:
    return (
        Tile.FLOOR_FIRST <= tile <= Tile.FLOOR_LAST
        or tile in _EXTRA_FLOOR_OR_CEILING
        or is_floor(tile)
    )


def is_ladder_top(tile: int) -> bool:
    return tile in _LADDER_TOPS