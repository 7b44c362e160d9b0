"""
Wordle Game - Main Entry Point

    python main.py serve     run the authoritative game server
    python main.py play      play in the terminal; falls back to offline
                             mode when the server cannot be reached
"""

import argparse
import json
import sys

from wordle_app import create_app
from wordle_app.config import Config, KEYBOARD_ROWS, config
from wordle_app.models import EmptyRow, GameStatus, KeyStatus, LetterStatus
from wordle_app.services import GameSession, ReconciliationService, RemoteGameClient
from wordle_app.services.game_service import initialize_game_service
from wordle_app.utils.game_logger import game_logger

COLORS = {
    LetterStatus.CORRECT: '\033[92m',
    LetterStatus.PRESENT: '\033[93m',
    LetterStatus.ABSENT: '\033[90m',
}
KEY_COLORS = {
    KeyStatus.CORRECT: COLORS[LetterStatus.CORRECT],
    KeyStatus.PRESENT: COLORS[LetterStatus.PRESENT],
    KeyStatus.ABSENT: COLORS[LetterStatus.ABSENT],
    KeyStatus.UNSET: '',
}
RESET = '\033[0m'


def render(session: GameSession) -> str:
    """Board, keyboard and message as coloured terminal text."""
    lines = []
    typing_row = True
    for row in session.rows:
        if isinstance(row, EmptyRow):
            if typing_row and session.status is GameStatus.IN_PROGRESS:
                lines.append(' '.join(session.current_guess.ljust(5, '_')))
                typing_row = False
            else:
                lines.append(' '.join('_' * 5))
        else:
            lines.append(' '.join(f"{COLORS[s]}{ch}{RESET}" for ch, s in zip(row.word, row.statuses)))

    lines.append('')
    keys = session.key_statuses
    for key_row in KEYBOARD_ROWS:
        cells = [k for k in key_row if len(k) == 1]
        lines.append(' '.join(f"{KEY_COLORS[keys[k]]}{k}{RESET}" for k in cells))

    if session.message:
        lines.append('')
        lines.append(session.message)
    return '\n'.join(lines)


def play(args):
    """Interactive terminal loop."""
    client = None if args.offline else RemoteGameClient(args.api_url, timeout=args.timeout)
    session = GameSession(ReconciliationService(client, diagnostic_mode=args.diagnostic))
    session.new_game()

    print("Type a word and press return. '<' deletes a letter, ':new' starts over, ':debug' shows the game state, ':quit' exits.")
    while True:
        print()
        print(render(session))
        try:
            line = input('> ').strip()
        except EOFError:
            break

        if line == ':quit':
            break
        if line == ':new':
            session.new_game()
            continue
        if line == ':debug':
            print(json.dumps(session.debug_snapshot(), indent=2))
            continue

        for ch in line:
            session.press('BACKSPACE' if ch == '<' else ch)
        if line and not line.endswith('<'):
            session.press('ENTER')


def serve(args):
    """Run the authority server."""
    app_config = config[args.env]
    initialize_game_service()
    app = create_app(app_config)

    game_logger.logger.info("Wordle Server Starting")
    print(f"Starting Wordle Game Server on {app_config.HOST}:{app_config.PORT}")
    print(f"Debug mode: {app_config.DEBUG}")
    print("=" * 50)

    try:
        app.run(host=app_config.HOST, port=app_config.PORT, debug=app_config.DEBUG)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Wordle game with offline fallback')
    sub = parser.add_subparsers(dest='command', required=True)

    serve_parser = sub.add_parser('serve', help='run the game server')
    serve_parser.add_argument('--env', choices=sorted(config), default='default')
    serve_parser.set_defaults(func=serve)

    play_parser = sub.add_parser('play', help='play in the terminal')
    play_parser.add_argument('--api-url', default=Config.API_BASE_URL)
    play_parser.add_argument('--timeout', type=float, default=Config.REMOTE_TIMEOUT_SECONDS)
    play_parser.add_argument('--offline', action='store_true', help='never contact the server')
    play_parser.add_argument('--diagnostic', action='store_true', default=Config.DIAGNOSTIC_MODE,
                             help='adopt the solution sent by a development server')
    play_parser.set_defaults(func=play)

    args = parser.parse_args(argv)
    args.func(args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
