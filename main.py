"""Blueprint Forge — dev launcher.

Default: serve the API with uvicorn in watch mode.
  --brief FILE   print the blueprint JSON for a brief stored as JSON
  --html OUT     with --brief, also write the playable page to OUT
"""

import argparse
import json
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")


def render_brief(brief_path: Path, html_out: Path | None, seed: int | None) -> None:
    from blueprint_forge.models import GameBrief
    from blueprint_forge.pipeline import generate_blueprint

    brief = GameBrief.model_validate_json(brief_path.read_text(encoding="utf-8"))
    blueprint = generate_blueprint(brief, seed=seed)
    if html_out is not None:
        html_out.write_text(blueprint.code, encoding="utf-8")
        print(f"Playable page written to {html_out}", file=sys.stderr)
    data = blueprint.to_json_dict()
    if html_out is not None:
        data.pop("code")
    print(json.dumps(data, ensure_ascii=False, indent=2))


def main():
    parser = argparse.ArgumentParser(description="Blueprint Forge dev launcher")
    parser.add_argument("--brief", type=Path, default=None,
                        help="JSON brief file ({title, theme, description, references})")
    parser.add_argument("--html", type=Path, default=None,
                        help="Write the playable page here (requires --brief)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Layout seed for the playable page")
    args = parser.parse_args()

    if args.html and not args.brief:
        parser.error("--html requires --brief")
    if args.brief:
        render_brief(args.brief, args.html, args.seed)
        return

    import uvicorn

    print(f"Starting backend on http://localhost:{BACKEND_PORT} ...")
    uvicorn.run("backend.app:app", host=HOST, port=int(BACKEND_PORT), reload=True)


if __name__ == "__main__":
    main()
