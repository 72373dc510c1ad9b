#!/usr/bin/env python3
"""
Layout Generator Script

Generate a scored layout: request (YAML or vibe name) → best of N candidates → JSON

Usage:
    python layout_gen.py --config configs/request.yaml --count 10
    python layout_gen.py --vibe minimal --content-type web --seed 0.42
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml

from vibe_layout import (
    AlgorithmOptions,
    ConfigValidationError,
    LayoutGeneratorConfig,
    generate_best_layout,
    get_score_report,
    list_vibes,
    parse_config,
)
from vibe_layout.generator import default_config
from vibe_layout.constants import DEFAULT_MAX_ITERATIONS, DEFAULT_MIN_SCORE


def load_request(path: str) -> dict:
    with open(path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ConfigValidationError(f"{path}: expected a mapping at top level")
    return data


def build_config(args) -> LayoutGeneratorConfig:
    """Request from --config, or the default request for --vibe/--content-type."""
    if args.config:
        data = load_request(args.config)
        if args.seed is not None:
            data["seed"] = args.seed
        return parse_config(data)

    config = default_config(args.vibe, args.content_type)
    return config.with_seed(args.seed) if args.seed is not None else config


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate vibe-driven 2D layouts")
    parser.add_argument("--config", type=str, help="YAML request file")
    parser.add_argument("--vibe", type=str, default="modern-saas",
                        help=f"Vibe id when no --config is given ({', '.join(list_vibes())})")
    parser.add_argument("--content-type", type=str, default="web", choices=["web", "business-card"])
    parser.add_argument("--count", type=int, default=1, help="Best-of-N draws")
    parser.add_argument("--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS)
    parser.add_argument("--min-score", type=float, default=DEFAULT_MIN_SCORE)
    parser.add_argument("--seed", type=float, default=None, help="Base seed (random if omitted)")
    parser.add_argument("--workers", type=int, default=1, help="Threads for best-of-N draws")
    parser.add_argument("--output", type=str, default="data/layout/outputs", help="Output directory")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except (ConfigValidationError, OSError, yaml.YAMLError) as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return 1

    options = AlgorithmOptions(max_iterations=args.max_iterations, min_score=args.min_score)

    print(f"Vibe: {config.vibe_id}, content type: {config.content_type.value}, draws: {args.count}")

    layout = generate_best_layout(
        config,
        count=args.count,
        options=options,
        workers=args.workers,
        show_progress=args.count > 1,
    )

    # Save
    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    with open(output_dir / "layout.json", 'w') as f:
        json.dump(layout.to_dict(), f, indent=2)

    with open(output_dir / "summary.json", 'w') as f:
        json.dump({
            "generated_at": datetime.now().isoformat(),
            "layout_id": layout.id,
            "vibe": layout.vibe_id,
            "content_type": layout.type.value,
            "score": layout.score.total,
            "seed": layout.metadata.seed,
            "iterations": layout.metadata.iterations,
            "count": args.count,
            "num_elements": len(layout.elements),
        }, f, indent=2)

    print(get_score_report(layout.score))
    print(f"Done! {len(layout.elements)} elements -> {output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
