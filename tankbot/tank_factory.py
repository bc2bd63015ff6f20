"""Building tanks with randomly chosen looks."""

from __future__ import annotations

from tankbot.engine import SquareRootEngine, SquareRootEngineConfig
from tankbot.rand import one_of
from tankbot.tank import Tank, TankTextures
from tankbot.textures import TextureStore
from tankbot.traces import TracesHandlerConfig

BODY_TEXTURES = (
    "tankBody_red.png",
    "tankBody_dark.png",
    "tankBody_blue.png",
    "tankBody_green.png",
)
TOWER_TEXTURES = (
    "tankDark_barrel2_outline.png",
    "tankRed_barrel2_outline.png",
    "tankGreen_barrel2_outline.png",
    "tankBlue_barrel2_outline.png",
)
SHOT_TEXTURE = "shotOrange.png"
TRACKS_TEXTURE = "tracksSmall.png"
TRACKS_TEXTURE_AREA = (0, 0, 37, 48)


def random_tank(store: TextureStore, x: float, y: float) -> Tank:
    """A tank at (x, y) with a random body and tower colour."""
    textures = TankTextures(
        body=store.get_texture(one_of(*BODY_TEXTURES)),
        tower=store.get_texture(one_of(*TOWER_TEXTURES)),
        shot=store.get_texture(SHOT_TEXTURE),
        tracks=store.get_texture(TRACKS_TEXTURE, TRACKS_TEXTURE_AREA),
    )
    return Tank(
        x,
        y,
        textures,
        SquareRootEngine(SquareRootEngineConfig(step_count=70, max_speed=5.0)),
        TracesHandlerConfig(max_trace_age=50, decay_rate=0.1),
    )