"""Playable game emitter.

Turns a world model into one self-contained HTML page (markup, styling and a
canvas 2D script) meant for a sandboxed iframe:
  layout      seeded pickup grid + enemy spawn row, physics constants
  template    the Handlebars page with the runtime script
  code        config building, script-safe escaping, rendering
  simulation  headless replica of the runtime state machine for play-tests

Runtime states: playing → victory (every pickup collected) or game_over
(enemy contact while playing). Both are terminal until a restart.
"""

from .code import build_game_config, emit_game_code, escape_for_script  # noqa: F401
from .layout import PHYSICS, Layout, Physics, build_layout, default_seed  # noqa: F401
from .simulation import (  # noqa: F401
    GAME_OVER,
    PLAYING,
    VICTORY,
    GameSimulation,
    PlaytestReport,
    playtest,
    scripted_playthrough,
)
