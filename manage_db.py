#!/usr/bin/env python3
"""
Administer the Standup Scheduler SQLite database.

The API has no endpoints for creating teams or users, so rosters are
maintained with this script.

Usage:
    python manage_db.py --db ./standups.db init
    python manage_db.py --db ./standups.db add-team "Platform"
    python manage_db.py --db ./standups.db add-user "Ada" --team 1
    python manage_db.py --db ./standups.db list-teams

``--db`` defaults to the ``DATABASE_URL`` setting.  Every command
creates the schema first if it is missing.
"""

import argparse
import sys

from standup_scheduler.app.core.db import close_engine, get_cursor, init_db, open_engine, transaction
from standup_scheduler.app.core.responses import Created, PreconditionFailed
from standup_scheduler.app.services.mutation_guard import MutationGuard


def add_team(name: str) -> int:
    with transaction() as cursor:
        cursor.execute("INSERT INTO teams (name) VALUES (?)", (name,))
        return cursor.lastrowid


def add_user(name: str, team_id: int) -> int:
    def insert(cursor):
        cursor.execute("INSERT INTO users (name, team_id) VALUES (?, ?)", (name, team_id))
        return cursor.lastrowid

    outcome = MutationGuard.guarded_write("team", team_id, insert, entity="user", created=True)
    if isinstance(outcome, PreconditionFailed):
        raise LookupError(f"Team {team_id} not found")
    if not isinstance(outcome, Created):
        raise RuntimeError(f"Could not create user {name!r}")
    return outcome.data


def list_teams() -> list:
    with get_cursor() as cursor:
        rows = cursor.execute(
            """
            SELECT t.id, t.name, COUNT(u.id) AS members
            FROM teams t LEFT JOIN users u ON u.team_id = t.id
            GROUP BY t.id, t.name ORDER BY t.id
            """
        ).fetchall()
    return [(row["id"], row["name"], row["members"]) for row in rows]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage the Standup Scheduler database (SQLite).")
    ap.add_argument("--db", help="Path to SQLite DB file (defaults to DATABASE_URL)")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("init", help="Create or migrate the schema")
    team = sub.add_parser("add-team", help="Create a team")
    team.add_argument("name")
    user = sub.add_parser("add-user", help="Create a user on a team")
    user.add_argument("name")
    user.add_argument("--team", type=int, required=True, help="Team id")
    sub.add_parser("list-teams", help="List teams with member counts")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    open_engine(args.db)
    try:
        init_db()
        if args.command == "init":
            print("[+] Schema is up to date")
        elif args.command == "add-team":
            print(f"[+] Created team {add_team(args.name)}: {args.name}")
        elif args.command == "add-user":
            try:
                user_id = add_user(args.name, args.team)
            except LookupError as exc:
                print(f"[!] {exc}", file=sys.stderr)
                return 2
            print(f"[+] Created user {user_id}: {args.name} (team {args.team})")
        elif args.command == "list-teams":
            for team_id, name, members in list_teams():
                print(f"{team_id}\t{name}\t{members} member(s)")
    finally:
        close_engine()
    return 0


if __name__ == "__main__":
    sys.exit(main())
