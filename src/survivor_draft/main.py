import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .application.context import RequestContext
from .application.draft_service import DraftApplicationService
from .domain.exceptions import DraftError
from .infrastructure.container import DraftContainer
from .infrastructure.draft_config_adapter import DraftConfiguration

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", log_file: str = "") -> None:
    """Configure logging settings"""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="survivor-draft", description="Survivor fantasy draft")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("groups", help="List all groups")
    sub.add_parser("seasons", help="List draftable seasons")

    create = sub.add_parser("create-group", help="Create a draft group")
    create.add_argument("name")
    create.add_argument("--creator", required=True, help="Your name (drafts first)")
    create.add_argument("--member", action="append", default=[], help="Another member")
    create.add_argument("--season", default=None)

    show = sub.add_parser("show", help="Show the draft board")
    show.add_argument("slug")
    show.add_argument("--user", default=None, help="Acting user")
    show.add_argument("--json", action="store_true", help="Print the board as JSON")

    create_round = sub.add_parser("create-round", help="Open the next round")
    create_round.add_argument("slug")

    pick = sub.add_parser("pick", help="Draft a contestant")
    pick.add_argument("slug")
    pick.add_argument("user")
    pick.add_argument("contestant_id", type=int)

    queue = sub.add_parser("queue", help="Edit an autodraft queue")
    queue.add_argument("slug")
    queue.add_argument("user")
    queue.add_argument("action", choices=["show", "toggle", "clear", "lock"])
    queue.add_argument("contestant_id", type=int, nargs="?")

    autodraft = sub.add_parser("autodraft", help="Pick from locked queues of on-turn users")
    autodraft.add_argument("slug")

    return parser


async def dispatch(service: DraftApplicationService, args: argparse.Namespace) -> None:
    if args.command == "groups":
        for summary in await service.list_groups():
            print(f"{summary.slug}\t{summary.name}")

    elif args.command == "seasons":
        for season in await service.list_seasons():
            print(f"{season.id}\t{season.name}")

    elif args.command == "create-group":
        group = await service.create_group(args.name, args.creator, args.member, args.season)
        print(group.slug)

    elif args.command == "show":
        board = await service.get_draft_board(args.slug, acting_user=args.user)
        if args.json:
            print(json.dumps(board.to_dict(), indent=2, ensure_ascii=False))
            return
        names = {c.id: c.name for c in board.contestants}
        print(f"{board.group.name} ({board.group.slug})")
        for user_name, picks in board.picks_by_user.items():
            picked = ", ".join(names.get(p.contestant_id, str(p.contestant_id)) for p in picks)
            print(f"  {user_name}: {picked or '-'}")
        if board.turn:
            print(f"Round {board.turn.round_number}, pick {board.turn.pick_number}: {board.turn.user_name}")
        else:
            print("No open round")
        print(f"Undrafted: {len(board.undrafted)}")

    elif args.command == "create-round":
        group = await service.create_round(args.slug)
        print(f"Round {len(group.draft_rounds)} created")

    elif args.command == "pick":
        context = RequestContext(args.slug, args.user, args.contestant_id)
        await service.make_pick(context)
        turn = await service.get_turn(args.slug)
        print(f"Next: {turn.user_name}" if turn else "Round complete")

    elif args.command == "queue":
        context = RequestContext(args.slug, args.user)
        if args.action == "toggle":
            queue = await service.toggle_autodraft_selection(context, args.contestant_id)
        elif args.action == "clear":
            queue = await service.clear_autodraft_queue(context)
        elif args.action == "lock":
            queue = await service.toggle_autodraft_lock(context)
        else:
            queue = await service.get_autodraft_queue(context)
        state = "locked" if queue.locked else "unlocked"
        print(f"{queue.contestant_ids} ({state})")

    elif args.command == "autodraft":
        result = await service.run_autodraft(args.slug)
        for pick in result.picks:
            print(f"{pick.user_name} -> {pick.contestant_id}")
        if result.waiting_on:
            print(f"Waiting on {result.waiting_on}")


async def main(argv: Optional[List[str]] = None, config: Optional[DraftConfiguration] = None) -> int:
    args = build_parser().parse_args(argv)
    container = DraftContainer(config)
    try:
        await dispatch(container.get_draft_service(), args)
        return 0
    except DraftError as e:
        logger.warning(f"{args.command} failed: {e.code}: {e}")
        print(f"Error ({e.code}): {e}", file=sys.stderr)
        return 1
    finally:
        await container.cleanup()


def run() -> None:
    config = DraftConfiguration.from_env()
    setup_logging(config.log_level, config.log_file)
    sys.exit(asyncio.run(main(config=config)))


if __name__ == "__main__":
    run()
