"""
Command line front end for the events client.

Usage:
    python -m event_roster list
    python -m event_roster show 42
    python -m event_roster register 42 Bob
    python -m event_roster confirm 42 Bob
    python -m event_roster remove 42 Bob
    python -m event_roster create --data '{"name": "Yoga"}'
    python -m event_roster login <token>
    python -m event_roster whoami

The events service URL comes from ``EVENTS_API_URL`` unless ``--url``
is given.  ``login`` only stores a token obtained elsewhere; it does
not talk to the service.
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from pydantic import ValidationError

from .client import EventClient
from .core.config import settings
from .core.logging_config import setup_logging
from .credentials import FileCredentialStore
from .errors import EventsApiError
from .roles import RoleResolver, decode_claims
from .schemas.event import Event


logger = logging.getLogger(__name__)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _describe(raw: Any) -> str:
    try:
        event = Event.model_validate(raw)
    except ValidationError:
        return json.dumps(raw, ensure_ascii=False)
    lines = [f"[{event.id}] {event.name or '(unnamed)'}"]
    lines.append(f"    participants: {len(event.participants)} ({event.confirmed_count} confirmed)")
    for p in event.participants:
        mark = "x" if p.confirmed else " "
        lines.append(f"    [{mark}] {p.name or p.user_name or p.id} ({p.user_name or '-'})")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="event_roster", description="Manage events and participants.")
    ap.add_argument("--url", help=f"Events collection URL (default: {settings.events_url})")
    ap.add_argument("--store", default=settings.credential_store_path, help="Credential store file")
    ap.add_argument("--json", dest="as_json", action="store_true", help="Print raw JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all events")

    p = sub.add_parser("show", help="Show a single event")
    p.add_argument("event_id")

    p = sub.add_parser("create", help="Create an event from a JSON object")
    p.add_argument("--data", required=True, help='Event payload, e.g. \'{"name": "Yoga"}\'')

    p = sub.add_parser("register", help="Register a participant")
    p.add_argument("event_id")
    p.add_argument("name")

    p = sub.add_parser("confirm", help="Confirm a participant")
    p.add_argument("event_id")
    p.add_argument("participant_id")

    p = sub.add_parser("remove", help="Remove a participant")
    p.add_argument("event_id")
    p.add_argument("participant_id")

    p = sub.add_parser("login", help="Store a signed token obtained elsewhere")
    p.add_argument("token")

    sub.add_parser("logout", help="Forget the stored token")
    sub.add_parser("whoami", help="Show roles found in the stored token")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level, settings.log_file, verbose=args.verbose)

    store = FileCredentialStore(args.store, settings.credential_key)
    resolver = RoleResolver(store, settings.privileged_role)

    if args.command == "login":
        try:
            decode_claims(args.token)
        except ValueError as exc:
            print(f"[!] Not a signed token: {exc}", file=sys.stderr)
            return 1
        store.store_credential(args.token)
        print(f"[+] Token stored in {store.path}")
        return 0
    if args.command == "logout":
        store.clear()
        print("[+] Token removed")
        return 0
    if args.command == "whoami":
        _print_json({"roles": sorted(resolver.roles), "privileged": resolver.is_privileged})
        return 0

    if args.url:
        client = EventClient(base_url=args.url, timeout=settings.request_timeout)
    else:
        client = EventClient.from_settings(settings)

    if args.command == "list":
        client.fetch_events()
        if args.as_json:
            _print_json(client.events)
        else:
            for raw in client.events:
                print(_describe(raw))
        return 0
    if args.command == "show":
        event = client.get_event_by_id(args.event_id)
        if event is None:
            print(f"[!] Event {args.event_id} not found", file=sys.stderr)
            return 2
        if args.as_json:
            _print_json(event)
        else:
            print(_describe(event))
        return 0

    try:
        if args.command == "create":
            if not resolver.is_privileged:
                logger.warning("Stored token has no %r role; the server may refuse", settings.privileged_role)
            try:
                payload = json.loads(args.data)
            except ValueError as exc:
                print(f"[!] Invalid JSON payload: {exc}", file=sys.stderr)
                return 1
            result = client.create_event(payload)
        elif args.command == "register":
            result = client.register_for_event(args.event_id, args.name)
        elif args.command == "confirm":
            result = client.confirm_participation(args.event_id, args.participant_id, True)
        else:
            result = client.remove_participant(args.event_id, args.participant_id)
    except EventsApiError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    if result is None:
        print("[+] Done")
    else:
        _print_json(result)
    return 0
