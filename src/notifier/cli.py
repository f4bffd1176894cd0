"""Command-line entry point for the notifier.

Usage:
    notifier channels
    notifier send --user-id u-1 --contact jane@example.com --title "Hi" --body "Hello"
    notifier send ... --channels Email,Push --deadline 5
    notifier serve --port 8000
"""

import argparse
import json
import sys

from notifier.bootstrap import build_container
from notifier.content import Content
from notifier.exceptions import ValidationError
from notifier.utils.logging import configure_logging

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="notifier", description="Multi-channel notification dispatcher")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("channels", help="List the configured channels")

    send = commands.add_parser("send", help="Dispatch one notification")
    send.add_argument("--user-id", required=True)
    send.add_argument("--contact", required=True, help="Recipient address, phone number or device token")
    send.add_argument("--title", required=True)
    send.add_argument("--body", required=True, help="Plain-text body")
    send.add_argument("--html-body")
    send.add_argument("--action-url")
    send.add_argument("--action-text")
    send.add_argument(
        "--channels",
        help="Comma-separated channel list stored as the user's preference before sending",
    )
    send.add_argument("--deadline", type=float, help="Overall time budget in seconds")

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("notifier.app:build_app", factory=True, host=args.host, port=args.port)
        return EXIT_OK

    configure_logging(stream=sys.stderr)
    container = build_container()

    if args.command == "channels":
        for name in container.dispatcher.list_channel_names():
            print(name)
        return EXIT_OK

    try:
        if args.channels is not None:
            container.dispatcher.set_preferences(args.user_id, args.channels.split(","))
        content = Content(
            title=args.title,
            plain_body=args.body,
            html_body=args.html_body,
            action_url=args.action_url,
            action_text=args.action_text,
        )
        outcomes = container.dispatcher.dispatch(args.user_id, args.contact, content, args.deadline)
    except ValidationError as e:
        print(json.dumps({"error": e.messages, "code": e.code}), file=sys.stderr)
        return EXIT_INVALID

    print(json.dumps([outcome.to_dict() for outcome in outcomes], indent=2))
    return EXIT_OK if all(outcome.succeeded for outcome in outcomes) else EXIT_PARTIAL


if __name__ == "__main__":
    sys.exit(main())
