#!/usr/bin/env python3
"""
Cabinet Game Launcher

Plays one game in a window with keyboard and mouse input.

Uses the game registry for auto-discovery. Game-specific arguments are
loaded from each game class's ARGUMENTS list.

Usage:
    # List available games
    python play.py --list

    # Play a game
    python play.py brickbreaker
    python play.py flappybird --tuning hard
    python play.py platformshooter --no-enemies

    # See game-specific options
    python play.py brickbreaker --help

    # With custom resolution
    python play.py brickbreaker --resolution 1024x768
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from cabinet.config import load_display_settings
from cabinet.errors import RenderSurfaceError
from cabinet.host import GameHost
from cabinet.logging import configure_logging, get_logger
from games.registry import get_registry

log = get_logger('launcher')

# Launcher options that are never passed to the game
LAUNCHER_ARGS = {'game', 'list', 'resolution', 'fullscreen', 'no_audio', 'fps', 'log_level'}


def add_game_arguments(parser: argparse.ArgumentParser, arguments: List[Dict[str, Any]]) -> None:
    """Add a game's ARGUMENTS definitions to an argparse parser."""
    added = set()
    for arg_def in arguments:
        arg_name = arg_def['name']
        if arg_name in added:
            continue
        added.add(arg_name)

        kwargs = {}
        if 'type' in arg_def:
            type_val = arg_def['type']
            # Handle type as string or actual type
            if isinstance(type_val, str):
                kwargs['type'] = {'str': str, 'int': int, 'float': float}.get(type_val, str)
            else:
                kwargs['type'] = type_val
        if 'default' in arg_def:
            kwargs['default'] = arg_def['default']
        if 'help' in arg_def:
            kwargs['help'] = arg_def['help']
        if 'action' in arg_def:
            kwargs['action'] = arg_def['action']
            kwargs.pop('type', None)  # action and type are mutually exclusive
        if 'choices' in arg_def:
            kwargs['choices'] = arg_def['choices']

        parser.add_argument(arg_name, **kwargs)


def parse_resolution(value: str):
    """'WIDTHxHEIGHT' -> (width, height)."""
    try:
        width, height = value.lower().split('x')
        return int(width), int(height)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid resolution {value!r}, expected WIDTHxHEIGHT (e.g. 1024x768)"
        )


def build_parser(available_games: List[str], game: Optional[str] = None) -> argparse.ArgumentParser:
    """Launcher parser, with the chosen game's options if one is given."""
    parser = argparse.ArgumentParser(
        description='Cabinet Game Launcher - play with keyboard and mouse',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available games: {', '.join(available_games)}

Examples:
  python play.py --list                  # List available games
  python play.py brickbreaker            # Play Brick Breaker
  python play.py flappybird --tuning hard
  python play.py <game> --help           # See game-specific options
        """
    )

    parser.add_argument('game', nargs='?', choices=available_games, help='Game to play')
    parser.add_argument('--list', '-l', action='store_true',
                        help='List all available games and exit')
    parser.add_argument('--resolution', '-r', type=parse_resolution, default=None,
                        help='Window resolution as WIDTHxHEIGHT (default: 800x600 or CABINET_WIDTH/HEIGHT)')
    parser.add_argument('--fullscreen', '-f', action='store_true',
                        help='Run in fullscreen mode')
    parser.add_argument('--no-audio', action='store_true',
                        help='Disable sound effects')
    parser.add_argument('--fps', type=int, default=None,
                        help='Display frame rate (default: 60 or CABINET_FPS)')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Global log level (default: INFO or CABINET_LOG_LEVEL)')

    if game:
        add_game_arguments(parser, get_registry().get_game_arguments(game))

    return parser


def print_games() -> None:
    registry = get_registry()
    print("\nAvailable Games")
    print("=" * 50)
    for slug in registry.list_games():
        info = registry.get_game_info(slug)
        print(f"\n  {slug}")
        print(f"    Name: {info.name}")
        print(f"    Description: {info.description}")
        print(f"    Version: {info.version}")
        if info.arguments:
            print(f"    Options: {', '.join(a['name'] for a in info.arguments)}")
        if info.presets:
            print(f"    Tuning presets: {', '.join(info.presets)}")
    print()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the launcher."""
    registry = get_registry()
    available_games = registry.list_games()

    # Phase 1: Parse just enough to identify the game
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('game', nargs='?', choices=available_games)
    pre_args, _ = pre_parser.parse_known_args(argv)

    # Phase 2: Full parser with game-specific arguments
    parser = build_parser(available_games, pre_args.game)
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    if args.list:
        print_games()
        return 0

    if args.game is None:
        parser.print_help()
        return 1

    settings = load_display_settings()
    if args.resolution:
        settings.width, settings.height = args.resolution
    if args.fullscreen:
        settings.fullscreen = True
    if args.no_audio:
        settings.audio_enabled = False
    if args.fps:
        settings.fps = args.fps

    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in LAUNCHER_ARGS and v is not None
    }
    if game_kwargs:
        log.info("Game options: %s", game_kwargs)

    host = GameHost(settings)
    try:
        return host.run(registry.get_game_class(args.game), **game_kwargs)
    except RenderSurfaceError as e:
        log.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
