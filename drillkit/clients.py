"""Client records stored one per line in a delimited text file."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from drillkit.text import split_words

DEFAULT_DELIM = "#//#"

_FIELD_COUNT = 5
_RULE = "_" * 96


def _format_balance(balance: float) -> str:
    """Render a balance the way a default stream prints it: six significant digits."""
    return f"{balance:g}"


@dataclass
class Client:
    """A bank client record."""

    account_number: str
    pin_code: str
    name: str
    phone: str
    balance: float = 0.0

    def to_line(self, delim: str = DEFAULT_DELIM) -> str:
        """Serialise the record as one delimited line, balance with six decimals."""
        return delim.join(
            [
                self.account_number,
                self.pin_code,
                self.name,
                self.phone,
                f"{self.balance:f}",
            ]
        )

    @classmethod
    def from_line(cls, line: str, delim: str = DEFAULT_DELIM) -> Client:
        """Parse a delimited line; empty fields between delimiters are skipped."""
        fields = split_words(line, delim)
        if len(fields) < _FIELD_COUNT:
            raise ValueError(
                f"expected {_FIELD_COUNT} fields, found {len(fields)}: {line!r}"
            )
        account_number, pin_code, name, phone, balance = fields[:_FIELD_COUNT]
        try:
            amount = float(balance)
        except ValueError:
            raise ValueError(f"invalid balance: {balance!r}") from None
        return cls(account_number, pin_code, name, phone, amount)


def load_clients(path: str | Path, delim: str = DEFAULT_DELIM) -> list[Client]:
    """Read every client from ``path``; a missing file holds no clients."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    return [Client.from_line(line, delim) for line in text.splitlines() if line]


def save_clients(
    path: str | Path, clients: Iterable[Client], delim: str = DEFAULT_DELIM
) -> None:
    """Overwrite ``path`` with one line per client."""
    with open(path, "w", encoding="utf-8") as handle:
        for client in clients:
            handle.write(client.to_line(delim) + "\n")


def append_client(path: str | Path, client: Client, delim: str = DEFAULT_DELIM) -> None:
    """Add one client line to the end of ``path``, creating it if needed."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(client.to_line(delim) + "\n")


def find_client(clients: Iterable[Client], account_number: str) -> Client | None:
    """Return the first client with ``account_number``, or None."""
    return next(
        (client for client in clients if client.account_number == account_number),
        None,
    )


def format_client_card(client: Client) -> str:
    """Render one client's details as a labelled card."""
    return (
        "\t\t\t\t______Client Data______\n\n"
        f"Accout Number   : {client.account_number}\n"
        f"Pin Code        : {client.pin_code}\n"
        f"Client Name     : {client.name}\n"
        f"Phone           : {client.phone}\n"
        f"Account Balance : {_format_balance(client.balance)}\n"
    )


def _table_row(cells: Sequence[str]) -> str:
    widths = (15, 10, 40, 12, 12)
    return "".join(f"| {cell:<{width}}" for cell, width in zip(cells, widths))


def format_client_table(clients: Sequence[Client]) -> str:
    """Render all clients as a fixed-width table with a count heading."""
    rule = f"\n{_RULE}\n\n"
    parts = [
        f"\n\t\t\t\t\tClient List ({len(clients)}) Client(s).",
        rule,
        _table_row(("Accout Number", "Pin Code", "Client Name", "Phone", "Balance")),
        rule,
    ]
    for client in clients:
        parts.append(
            _table_row(
                (
                    client.account_number,
                    client.pin_code,
                    client.name,
                    client.phone,
                    _format_balance(client.balance),
                )
            )
            + "\n"
        )
    parts.append(rule)
    return "".join(parts)