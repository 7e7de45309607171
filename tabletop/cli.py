"""
Tabletop CLI - Command-line interface for the engine.

Usage:
    tabletop simulate [--players N] [--seed S]   Play a game with first-legal moves
    tabletop advise --dice 7 --open 111111111    Ask for a shut-the-box move
    tabletop serve [--host H] [--port P]         Run the HTTP API
"""

import argparse
import logging
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tabletop - Board game rules engine",
        prog="tabletop",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play a full game automatically")
    simulate_parser.add_argument("--players", type=int, default=2, help="Number of players (2-4)")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    simulate_parser.add_argument("--max-turns", type=int, default=1000, help="Stop after this many turns")

    # Advise command
    advise_parser = subparsers.add_parser("advise", help="Ask for the best shut-the-box move")
    advise_parser.add_argument("--dice", type=int, required=True, help="Dice total (2-12)")
    advise_parser.add_argument(
        "--open", default="111111111", help="Nine 0/1 flags for tiles 1-9 (1 = open)"
    )
    advise_parser.add_argument("--url", default=None, help="Advisory service base URL")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8080)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "simulate":
        return cmd_simulate(args)
    elif args.command == "advise":
        return cmd_advise(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        return 1


def cmd_simulate(args):
    """Play until the game ends, always taking the first legal action."""
    from .engine_core import legal_actions, determine_outcome, GamePhase
    from .session import SessionManager

    names = [f"Player {i}" for i in range(1, args.players + 1)]
    try:
        session = SessionManager().create_session(names, random_seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    turns = 0
    while session.state.phase != GamePhase.ENDED and turns < args.max_turns:
        action = legal_actions(session.state)[0]
        result = session.dispatch(action)
        for change in result.state_changes:
            print(f"  {change}")
        turns += 1

    state = session.state
    outcome = determine_outcome(state)
    print(f"\nPhase: {state.phase.value} after {turns} turns (round {state.round_number})")
    for player in state.players:
        print(f"  {player.name}: {player.score} points, {player.card_count} cards")
    if outcome.is_draw:
        print("Result: draw between " + ", ".join(outcome.winner_ids))
    else:
        print(f"Result: {outcome.winner_id} leads")
    return 0


def cmd_advise(args):
    """Ask the advisory service for a move."""
    from .advisory import AdvisoryClient
    from .games.shut_the_box import D6, ShutTheBoxState, Tile

    flags = args.open.strip()
    if len(flags) != 9 or set(flags) - {"0", "1"}:
        print("Error: --open must be nine 0/1 characters")
        return 1
    if not 2 <= args.dice <= 12:
        print("Error: --dice must be between 2 and 12")
        return 1

    # Any two faces with the right total give the same request
    d1 = min(6, args.dice - 1)
    state = ShutTheBoxState(
        d1=D6(d1),
        d2=D6(args.dice - d1),
        tiles=tuple(Tile(value=i + 1, is_open=f == "1") for i, f in enumerate(flags)),
    )

    client = AdvisoryClient(base_url=args.url) if args.url else AdvisoryClient()
    action = client.find_best_action(state)
    if action is None:
        print("No recommendation")
    else:
        print("Shut tiles: " + " ".join(str(v) for v in action))
    return 0


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn
    from .api.app import get_app

    uvicorn.run(get_app(), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
