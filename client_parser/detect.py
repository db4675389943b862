# client_parser/detect.py

from __future__ import annotations
import json
import logging
from pathlib import Path

import click

from client_parser.classifier import classify
from client_parser.config import settings
from client_parser.schemas import render

logger = logging.getLogger(__name__)


def load_user_agents(path: Path) -> list[tuple[str, str | None]]:
    """
    Read a JSON array of user agent strings or {user_agent, platform} objects.
    """
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)

    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array")

    entries = []
    for item in data:
        if isinstance(item, str):
            entries.append((item, None))
        elif isinstance(item, dict):
            entries.append((item.get("user_agent") or "", item.get("platform")))
        else:
            raise ValueError(f"Unsupported entry in {path}: {item!r}")
    return entries


def detect_all(entries: list[tuple[str, str | None]], shape: str = "nested") -> list[dict]:
    return [render(classify(user_agent, platform), shape) for user_agent, platform in entries]


@click.command()
@click.option("--input", "input_path", default=settings.samples_path, show_default=True,
              type=click.Path(dir_okay=False), help="JSON array of user agents")
@click.option("--output", "output_path", default=settings.output_path, show_default=True,
              type=click.Path(dir_okay=False), help="Where to write the detection results")
@click.option("--shape", default="nested", show_default=True,
              type=click.Choice(["nested", "legacy"]), help="Result shape")
def main(input_path, output_path, shape):
    """Detect device info for a file of user agents and save the results as JSON."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        entries = load_user_agents(Path(input_path))
    except (OSError, ValueError) as e:
        logger.error(f"Could not read user agents from {input_path}: {e}")
        raise click.ClickException(str(e))

    click.echo(f"Detecting device info for {len(entries)} user agents...")
    results = detect_all(entries, shape)
    click.echo("Detection complete.")

    out = Path(output_path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(results, indent=2), encoding="utf-8")
    except OSError as e:
        logger.error(f"Error saving detection results: {e}")
        raise click.ClickException(f"Error saving detection results: {e}")

    click.echo(f"Successfully saved detection results to: {out}")


if __name__ == "__main__":
    main()
