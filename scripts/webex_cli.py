"""Operator CLI for the Webex connector.

This module serves as a CLI wrapper around webex_connector.core.webex.
Results are printed as JSON on stdout.
"""
from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from webex_connector.config import load_settings
from webex_connector.core.webex import ConnectorError, WebexDriver, WebexUser


def _user_from_args(args: argparse.Namespace) -> WebexUser:
    return WebexUser(
        emails=args.email or None,
        display_name=args.display_name,
        first_name=args.first_name,
        last_name=args.last_name,
    )


def _print_json(value) -> None:
    print(json.dumps(value, indent=2, sort_keys=True))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Webex people and roles helper")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("test", help="Check that the configured token is accepted")
    sub.add_parser("list-users")

    gu = sub.add_parser("get-user")
    gu.add_argument("user_id")

    for name in ("create-user", "update-user"):
        sp = sub.add_parser(name)
        if name == "update-user":
            sp.add_argument("user_id")
        sp.add_argument("--email", action="append", required=name == "create-user")
        sp.add_argument("--display-name")
        sp.add_argument("--first-name")
        sp.add_argument("--last-name")

    du = sub.add_parser("delete-user")
    du.add_argument("user_id")

    sub.add_parser("list-roles")

    gr = sub.add_parser("get-role")
    gr.add_argument("role_id")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        sys.exit(1)

    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(f"[webex] {exc}", file=sys.stderr)
        sys.exit(1)

    driver = WebexDriver(settings)
    try:
        if args.cmd == "test":
            driver.test()
            print("[webex] Connection OK", file=sys.stderr)
        elif args.cmd == "list-users":
            _print_json([user.to_dict() for user in driver.get_users()])
        elif args.cmd == "get-user":
            _print_json(driver.get_user(args.user_id).to_dict())
        elif args.cmd == "create-user":
            user_id = driver.create_user(_user_from_args(args))
            _print_json({"id": user_id})
        elif args.cmd == "update-user":
            driver.update_user(args.user_id, _user_from_args(args))
            print(f"[webex] User '{args.user_id}' updated", file=sys.stderr)
        elif args.cmd == "delete-user":
            driver.delete_user(args.user_id)
            print(f"[webex] User '{args.user_id}' deleted", file=sys.stderr)
        elif args.cmd == "list-roles":
            _print_json([role.to_dict() for role in driver.get_groups()])
        elif args.cmd == "get-role":
            _print_json(driver.get_group(args.role_id).to_dict())
    except ConnectorError as exc:
        print(f"[webex] {type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        driver.close()


if __name__ == "__main__":
    main()
