from __future__ import annotations

from typing import Iterable, List, Sequence

from pydantic import BaseModel

from expense_tracker.client.models import ALL_CATEGORIES, Category, Transaction, TransactionType


class CategoryTotal(BaseModel):
    category: str
    value: float


class Summary(BaseModel):
    income: float
    expense: float
    balance: float
    by_category: List[CategoryTotal]


def filter_by_category(transactions: Sequence[Transaction], category: str) -> Sequence[Transaction]:
    if category == ALL_CATEGORIES:
        return transactions
    return [t for t in transactions if t.category == category]


def _total(transactions: Iterable[Transaction], type_: TransactionType) -> float:
    # Unrounded; rounding happens only in format_amount
    return sum((t.amount for t in transactions if t.type == type_.value), 0.0)


def total_income(transactions: Iterable[Transaction]) -> float:
    return _total(transactions, TransactionType.INCOME)


def total_expense(transactions: Iterable[Transaction]) -> float:
    return _total(transactions, TransactionType.EXPENSE)


def net_balance(transactions: Sequence[Transaction]) -> float:
    return total_income(transactions) - total_expense(transactions)


def expense_by_category(transactions: Sequence[Transaction]) -> List[CategoryTotal]:
    """Expense sums per known category, in declared order, empty slices dropped.

    Records whose category is not a :class:`Category` member never match.
    """
    breakdown = []
    for cat in Category:
        value = sum(
            (t.amount for t in transactions
             if t.type == TransactionType.EXPENSE.value and t.category == cat.value),
            0.0,
        )
        if value > 0:
            breakdown.append(CategoryTotal(category=cat.value, value=value))
    return breakdown


def summarize(transactions: Sequence[Transaction]) -> Summary:
    income = total_income(transactions)
    expense = total_expense(transactions)
    return Summary(
        income=income,
        expense=expense,
        balance=income - expense,
        by_category=expense_by_category(transactions),
    )


def format_amount(value: float) -> str:
    return f"{value:.2f}"
