"""Tests for display formatting."""

import pytest

from src.models.account import Account, AccountType
from src.services.formatting import format_money, group_indian, render_account, render_accounts


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, "0"),
        (500, "500"),
        (1000, "1,000"),
        (15000, "15,000"),
        (150000, "1,50,000"),
        (1500000, "15,00,000"),
        (123456789, "12,34,56,789"),
        (-150000, "-1,50,000"),
    ],
)
def test_group_indian(n, expected):
    assert group_indian(n) == expected


def test_format_money():
    assert format_money(150000) == "₹1,50,000"
    assert format_money(1500, symbol="Rs ") == "Rs 1,500"


def test_render_accounts_empty():
    assert render_accounts([]) == "No accounts found."


def test_render_accounts_table():
    table = render_accounts(
        [
            Account(101, "Asha", AccountType.SAVINGS, 500),
            Account(202, "Ravi", AccountType.CURRENT, 150000),
        ]
    )
    lines = table.splitlines()

    assert "Account No" in lines[0]
    assert "Holder Name" in lines[0]
    assert len(lines) == 4  # header, rule, two rows
    assert "Asha" in lines[2] and "Savings" in lines[2] and "₹500" in lines[2]
    assert "Ravi" in lines[3] and "Current" in lines[3] and "₹1,50,000" in lines[3]


def test_render_account():
    details = render_account(Account(101, "Asha", AccountType.SAVINGS, 1500))
    assert details.splitlines() == [
        "Account No: 101",
        "Holder Name: Asha",
        "Account Type: Savings",
        "Balance: ₹1,500",
    ]
