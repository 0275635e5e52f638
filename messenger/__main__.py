import argparse
import asyncio
import logging
import sys

from messenger.config import get_settings
from messenger.console import Console
from messenger.db.engine import connect
from messenger.errors import ConnectionFailedError
from messenger.loader import create_dispatcher, create_session

INTERRUPTED_EXIT_CODE = 130

GREETING = (
    "\n\n*******************************************************\n"
    "              User Interface\n"
    "*******************************************************\n"
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="messenger",
        description="Console messaging client.",
    )
    parser.add_argument("database", help="database name, or a path ending in .db")
    parser.add_argument("port", type=int, help="database port")
    parser.add_argument("username", help="database user")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = get_settings(args.database, args.port, args.username)
    except ValueError as e:
        print(f"Error - {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)
    console = console or Console()

    console.say(GREETING)
    console.say("Connecting to database...")
    logger.info(
        "Opening %s for %s (port %s)",
        settings.db_path, settings.username, settings.port,
    )
    try:
        db = await connect(settings.db_path)
    except ConnectionFailedError as e:
        logger.error("%s", e)
        print(f"Error - Unable to Connect to Database: {e}", file=sys.stderr)
        return 1
    console.say("Done")

    dp = create_dispatcher()
    session = create_session(db, settings, console)
    try:
        await dp.run(session)
    except EOFError:
        logger.info("Input closed, exiting.")
    finally:
        console.say("Disconnecting from database...")
        await db.close()
        console.say("Done\n\nBye !")
    return 0


def run() -> None:
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        code = INTERRUPTED_EXIT_CODE
    sys.exit(code)


if __name__ == "__main__":
    run()
