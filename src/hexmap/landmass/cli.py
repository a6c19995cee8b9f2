"""Command-line preview of landmass generation."""

import argparse
import logging
import sys
import time
from pathlib import Path

import structlog

from ..config import (
    MAP_SIZE_PRESETS,
    LandmassConfig,
    MapShape,
    MapSize,
    MapType,
    find_config,
    load_config,
)
from .preview import render_ascii, save_image


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and preview a hex map land/water layout"
    )
    parser.add_argument(
        "--config", "-c", type=str, default=None, help="Config name or TOML path"
    )
    parser.add_argument(
        "--type",
        choices=[t.value for t in MapType],
        default=None,
        help="Map type (overrides config)",
    )
    parser.add_argument(
        "--shape",
        choices=[s.value for s in MapShape],
        default=None,
        help="Map shape (overrides config)",
    )
    parser.add_argument(
        "--size",
        choices=sorted(MAP_SIZE_PRESETS),
        default=None,
        help="Map size preset (overrides config)",
    )
    parser.add_argument("--radius", type=int, default=None, help="Custom radius")
    parser.add_argument("--width", type=int, default=None, help="Custom width")
    parser.add_argument("--height", type=int, default=None, help="Custom height")
    parser.add_argument(
        "--water-threshold", type=float, default=None, help="Water threshold"
    )
    parser.add_argument(
        "--world-wrap",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable or disable world wrap (overrides config)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--no-render", action="store_true", help="Only print statistics"
    )
    parser.add_argument(
        "--output", "-o", type=Path, default=None, help="Save a PNG preview here"
    )
    parser.add_argument(
        "--scale", type=int, default=4, help="Pixels per cell in the PNG preview"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def _apply_overrides(
    config: LandmassConfig, args: argparse.Namespace
) -> LandmassConfig:
    params = config.map
    update: dict = {}

    if args.type is not None:
        update["type"] = MapType(args.type)
    if args.shape is not None:
        update["shape"] = MapShape(args.shape)
    if args.water_threshold is not None:
        update["water_threshold"] = args.water_threshold
    if args.world_wrap is not None:
        update["world_wrap"] = args.world_wrap
    if args.seed is not None:
        update["seed"] = args.seed

    size = MapSize.from_preset(args.size) if args.size else params.map_size
    custom = {
        key: value
        for key, value in (
            ("radius", args.radius),
            ("width", args.width),
            ("height", args.height),
        )
        if value is not None
    }
    if custom:
        size = MapSize(**{**size.model_dump(), **custom, "name": "Custom"})
    update["map_size"] = size

    return config.model_copy(update={"map": params.model_copy(update=update)})


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for landmass preview."""
    args = _build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    # Import here to avoid slow startup for --help
    from ..terrain_types import TerrainType, get_initialization_terrain
    from .generator import generate_world

    if args.config:
        config = load_config(find_config(args.config))
    else:
        config = LandmassConfig()
    config = _apply_overrides(config, args)
    ruleset = config.ruleset()
    params = config.map

    print(
        f"Generating {params.type.value} map, shape {params.shape.value}, "
        f"size {params.map_size.name}, seed {params.seed}"
    )

    start_time = time.time()
    tile_map, result = generate_world(params, ruleset)
    gen_time = time.time() - start_time

    water_terrain = (
        None
        if result.land_only
        else get_initialization_terrain(ruleset, TerrainType.WATER)
    )

    if not args.no_render:
        print()
        print(render_ascii(tile_map, water_terrain))
        print()

    if args.output:
        output_path = save_image(tile_map, water_terrain, args.output, args.scale)
        print(f"Saved preview to {output_path}")

    stats = result.stats
    print(f"Generation complete in {gen_time:.2f}s")
    print(
        f"Tiles: {stats.total}, land: {stats.land} ({stats.land_fraction:.1%}), "
        f"water: {stats.water}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
