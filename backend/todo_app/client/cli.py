"""Terminal front end — one-shot commands against the todo API.

Each command loads the list, applies at most one mutation through
TodoListView, and prints the rendered list. Exit status is 1 when the
mutation or the initial load failed.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from todo_app.client.api import TodoApiClient
from todo_app.client.config import ClientSettings, get_client_settings
from todo_app.client.todo_list import TodoListView


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser("todo-client")
    p.add_argument("--api-url", default=None, help="Base URL of the todo API")
    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Show all todos")
    add = sub.add_parser("add", help="Create a todo")
    add.add_argument("title", nargs="+")
    toggle = sub.add_parser("toggle", help="Flip a todo's completed flag")
    toggle.add_argument("todo_id")
    delete = sub.add_parser("delete", help="Delete a todo")
    delete.add_argument("todo_id")
    return p.parse_args(argv)


async def run(args: argparse.Namespace, api: TodoApiClient) -> int:
    view = TodoListView(api)
    ok = await view.load()
    if args.command == "add":
        view.set_title(" ".join(args.title))
        ok = await view.add()
    elif args.command == "toggle":
        ok = await view.toggle(args.todo_id)
    elif args.command == "delete":
        ok = await view.delete(args.todo_id)
    print(view.render())
    return 0 if ok else 1


async def _main(args: argparse.Namespace) -> int:
    settings = get_client_settings()
    if args.api_url:
        settings = ClientSettings(
            api_url=args.api_url,
            api_timeout_seconds=settings.api_timeout_seconds,
        )
    async with TodoApiClient(settings) as api:
        return await run(args, api)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    sys.exit(asyncio.run(_main(args)))
