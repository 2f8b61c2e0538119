"""Command-line launcher for Treasure Snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from treasure_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treasure-snake",
        description="Treasure Snake game server and tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    def add_game_flags(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--config", type=str, default=None,
            help="Path to a JSON config file (flags override its values).",
        )
        p.add_argument("--grid-size", type=int, default=None)
        p.add_argument("--cell-size", type=int, default=None)
        p.add_argument("--tick-ms", type=int, default=None)
        p.add_argument("--seed", type=int, default=None)

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the HTTP/WebSocket game server.")
    add_game_flags(serve_p)
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)

    # --- render ---
    render_p = sub.add_parser(
        "render", help="Play a scripted game headlessly and save the last frame.",
    )
    add_game_flags(render_p)
    render_p.add_argument(
        "--keys", type=str, default="",
        help="Comma-separated keys, one per tick (e.g. 'd,d,s,ArrowLeft').",
    )
    render_p.add_argument(
        "--ticks", type=int, default=None,
        help="Ticks to play (defaults to the number of keys).",
    )
    render_p.add_argument("--output", type=str, default="frame.png")

    # --- config ---
    config_p = sub.add_parser("config", help="Write the effective config as JSON.")
    add_game_flags(config_p)
    config_p.add_argument("--output", type=str, default=None)

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "grid_size": "grid_size",
        "cell_size": "cell_size",
        "tick_ms": "tick_ms",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig.from_dict(d)
    return config


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from treasure_snake.server.app import create_app

    app = create_app(_load_config(args), seed=args.seed)
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def _run_render(args: argparse.Namespace) -> int:
    from treasure_snake.engine import GameEngine
    from treasure_snake.keys import handle_key
    from treasure_snake.render import Renderer

    config = _load_config(args)
    engine = GameEngine(config, seed=args.seed)
    keys = [k for k in args.keys.split(",") if k.strip()]
    ticks = args.ticks if args.ticks is not None else len(keys)

    engine.start()
    for i in range(ticks):
        if i < len(keys):
            handle_key(engine, keys[i])
        engine.advance()
        if engine.game_over:
            break

    out = Path(args.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    Renderer(config).render(engine.state).save(out)
    logger.info(
        "Rendered tick %d (score %d, game over: %s) to %s",
        engine.state.tick, engine.score, engine.game_over, out,
    )
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args)
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``treasure-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "render": _run_render,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
