"""Display formatting for amounts and account lists."""

from typing import Iterable

from tabulate import tabulate

from src.models.account import Account


def group_indian(n: int) -> str:
    """
    Format an integer with Indian digit grouping.

    The last three digits form one group and the rest are grouped in pairs,
    e.g. 1500000 -> "15,00,000".
    """
    sign = "-" if n < 0 else ""
    digits = str(abs(n))
    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def format_money(n: int, symbol: str = "₹") -> str:
    return f"{symbol}{group_indian(n)}"


def render_accounts(accounts: Iterable[Account], symbol: str = "₹") -> str:
    """Render accounts as a plain-text table, or a placeholder when there are none."""
    rows = [
        [
            account.account_no,
            account.holder_name,
            account.account_type.label,
            format_money(account.balance, symbol),
        ]
        for account in accounts
    ]
    if not rows:
        return "No accounts found."
    return tabulate(
        rows,
        headers=["Account No", "Holder Name", "Type", "Balance"],
        stralign="left",
        colalign=("right", "left", "left", "right"),
    )


def render_account(account: Account, symbol: str = "₹") -> str:
    """Render the details of one account."""
    return "\n".join(
        [
            f"Account No: {account.account_no}",
            f"Holder Name: {account.holder_name}",
            f"Account Type: {account.account_type.label}",
            f"Balance: {format_money(account.balance, symbol)}",
        ]
    )
