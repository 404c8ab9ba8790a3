"""
Builders for synthetic ABA lines used across the test suite.

Each builder pads its columns to the standard 120-character ABA layout so
tests can state values instead of counting spaces.
"""

from __future__ import annotations


def header_line(
    bsb: str = "123-456",
    account: str = "12341234",
    sequence: str = "01",
    bank: str = "BQL",
    user: str = "MY NAME",
    user_number: str = "111111",
    description: str = "1004231633",
    date: str = "230410",
    time: str = "",
) -> str:
    return (
        "0"
        + bsb.ljust(7)
        + account.rjust(9)
        + " "
        + sequence.rjust(2, "0")
        + bank.ljust(3)
        + " " * 7
        + user.ljust(26)
        + user_number.rjust(6, "0")
        + description.ljust(12)
        + date.ljust(6)
        + time.ljust(4)
    ).ljust(120)


def detail_line(
    amount_cents: int,
    code: int = 53,
    bsb: str = "123-456",
    account: str = "157108231",
    indicator: str = " ",
    title: str = "S R SMITH",
    reference: str = "TEST BATCH",
    trace_bsb: str = "062-000",
    trace_account: str = "12223123",
    remitter: str = "MY ACCOUNT",
    tax_cents: int = 0,
) -> str:
    return (
        "1"
        + bsb.ljust(7)
        + account.rjust(9)
        + indicator.ljust(1)
        + str(code).rjust(2, "0")
        + str(amount_cents).rjust(10, "0")
        + title.ljust(32)
        + reference.ljust(18)
        + trace_bsb.ljust(7)
        + trace_account.rjust(9)
        + remitter.ljust(16)
        + str(tax_cents).rjust(8, "0")
    )


def total_line(
    credit_cents: int,
    debit_cents: int,
    count: int,
    bsb: str = "999-999",
    net_cents: int | None = None,
) -> str:
    if net_cents is None:
        net_cents = abs(credit_cents - debit_cents)
    return (
        "7"
        + bsb.ljust(7)
        + " " * 12
        + str(net_cents).rjust(10, "0")
        + str(credit_cents).rjust(10, "0")
        + str(debit_cents).rjust(10, "0")
        + " " * 24
        + str(count).rjust(6, "0")
        + " " * 40
    )


# Four credits to four payees, closed by a matching file total record.
SAMPLE_LINES = [
    header_line(),
    detail_line(1234, indicator="Y", tax_cents=1200),
    detail_line(2200, bsb="123-783", account="12312312", title="J K MATTHEWS", tax_cents=30),
    detail_line(3123513, bsb="456-789", account="125123", title="P R JONES"),
    detail_line(2300, bsb="121-232", account="11422", title="S MASLIN"),
    total_line(3129247, 0, 4),
]

SAMPLE_ABA = "\n".join(SAMPLE_LINES)
