"""Brief → blueprint derivation pipeline.

Stages, each a pure function of its inputs plus the injected asset lookup:
  1. interpret   brief → WorldModel (keywords, rule tables, fallbacks)
  2. synthesize  WorldModel → up to 8 GeneratedAsset with bank suggestions
  3. emit        WorldModel → playable HTML page (blueprint_forge.emitter)
  4. assemble    everything → GameBlueprint (summary, updates, message)

`generate_blueprint` runs the four stages; `generate_with_generator` swaps
the emitted page for code returned by the hosted generator.
"""

from .assembler import assemble, merge_updates, refine_brief  # noqa: F401
from .assets import synthesize  # noqa: F401
from .interpreter import interpret  # noqa: F401
from .keywords import extract_keywords  # noqa: F401
from .orchestrator import generate_blueprint, generate_with_generator  # noqa: F401
