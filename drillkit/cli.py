"""Interactive command line for managing the client records file."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence
from pathlib import Path

from drillkit.clients import (
    DEFAULT_DELIM,
    Client,
    append_client,
    find_client,
    format_client_card,
    format_client_table,
    load_clients,
    save_clients,
)

DEFAULT_FILE = "Clients_Data.txt"
_NOT_FOUND = "Oops , Client is not here"


def _index_of(clients: Sequence[Client], account_number: str) -> int:
    for index, client in enumerate(clients):
        if client.account_number == account_number:
            return index
    raise LookupError(f"no client with account number {account_number!r}")


def delete_client(clients: Sequence[Client], account_number: str) -> list[Client]:
    """Return a new list without the first client holding ``account_number``.

    Raises LookupError when no such client exists.
    """
    index = _index_of(clients, account_number)
    return [*clients[:index], *clients[index + 1 :]]


def update_client(
    clients: Sequence[Client],
    account_number: str,
    pin_code: str,
    name: str,
    phone: str,
    balance: float,
) -> list[Client]:
    """Return a new list where the matching client gets the new details.

    The account number is kept. Raises LookupError when no such client exists.
    """
    index = _index_of(clients, account_number)
    updated = dataclasses.replace(
        clients[index], pin_code=pin_code, name=name, phone=phone, balance=balance
    )
    return [*clients[:index], updated, *clients[index + 1 :]]


def _read(prompt: str) -> str:
    """Prompt and read one line; end of input reads as an empty line."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def _confirm(prompt: str, pass_case: str = "y") -> bool:
    tokens = _read(prompt).split()
    return bool(tokens) and tokens[0] == pass_case


def _read_new_client() -> Client:
    sys.stdout.write("\n\t\tPlease enter client data.\n\n")
    return Client(
        account_number=_read("Enter Account number.\n>> "),
        pin_code=_read("Enter pin code.\n>> "),
        name=_read("Enter the name.\n>> "),
        phone=_read("Enter phone number.\n>> "),
        balance=0.0,
    )


def _add(path: Path) -> int:
    while True:
        append_client(path, _read_new_client(), DEFAULT_DELIM)
        if not _confirm("Do you want to add anothr client. (y/n)\n"):
            return 0


def _list(path: Path) -> int:
    sys.stdout.write(format_client_table(load_clients(path, DEFAULT_DELIM)))
    return 0


def _find(path: Path) -> int:
    account_number = _read("Enter Accout Number to search\n>> ")
    client = find_client(load_clients(path, DEFAULT_DELIM), account_number)
    if client is None:
        print(_NOT_FOUND)
        return 1
    sys.stdout.write(format_client_card(client))
    return 0


def _delete(path: Path) -> int:
    account_number = _read("Enter Accout Number to delete\n>> ")
    clients = load_clients(path, DEFAULT_DELIM)
    client = find_client(clients, account_number)
    if client is None:
        print(_NOT_FOUND)
        return 1
    sys.stdout.write(format_client_card(client))
    if _confirm("Are you sure to delete this client. (y/n)\n>> "):
        save_clients(path, delete_client(clients, account_number), DEFAULT_DELIM)
        print("Client deleted successfully")
    return 0


def _update(path: Path) -> int:
    account_number = _read("Enter Accout Number to update\n>> ")
    clients = load_clients(path, DEFAULT_DELIM)
    client = find_client(clients, account_number)
    if client is None:
        print(_NOT_FOUND)
        return 1
    sys.stdout.write(format_client_card(client))
    if not _confirm("Are you sure to update this client. (y/n)\n>> "):
        return 0
    sys.stdout.write("\n\t\tPlease enter new client data.\n\n")
    pin_code = _read("Enter new pin code.\n>> ")
    name = _read("Enter the new name.\n>> ")
    phone = _read("Enter new phone number.\n>> ")
    raw_balance = _read("Enter new balance.\n>> ")
    try:
        balance = float(raw_balance)
    except ValueError:
        print(f"invalid balance: {raw_balance!r}", file=sys.stderr)
        return 1
    save_clients(
        path,
        update_client(clients, account_number, pin_code, name, phone, balance),
        DEFAULT_DELIM,
    )
    print("Client updated successfully")
    return 0


_COMMANDS = {
    "add": (_add, "add clients one after another"),
    "list": (_list, "show every client as a table"),
    "find": (_find, "show one client by account number"),
    "delete": (_delete, "delete a client by account number"),
    "update": (_update, "update a client by account number"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drillkit", description="Manage a file of client records."
    )
    parser.add_argument(
        "--file",
        default=DEFAULT_FILE,
        help=f"client records file (default: {DEFAULT_FILE})",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one client-management command and return its exit status."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    return handler(Path(args.file))


if __name__ == "__main__":
    raise SystemExit(main())