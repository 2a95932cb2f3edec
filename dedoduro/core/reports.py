# dedoduro/core/reports.py
import datetime
from typing import Any, Dict, List

import pandas as pd

from dedoduro.core import db
from dedoduro.core.db import JsonStore
from dedoduro.core.models import EXPENSE_FIELDS
from dedoduro.utils.text_utils import format_amount

# Nomes em minúsculas, como o locale pt-br do moment
MONTH_NAMES = [
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
]

# Ordem importa: a primeira substring encontrada define o grupo
PAYMENT_BUCKETS = [
    ("dinheiro", "Dinheiro"),
    ("pix", "PIX"),
    ("crédito", "Cartão de Crédito"),
    ("débito", "Cartão de Débito"),
]

NO_DAILY_EXPENSES = "Ainda não foi adicionado nenhum gasto no dia de hoje!"
NO_MONTHLY_EXPENSES = "Ainda não foi adicionado nenhuma despesa no mês atual!"
NO_ANNUAL_EXPENSES = "Ainda não foi adicionado nenhuma despesa no ano atual!"


def payment_bucket(payment_method: Any) -> str:
    """Grupo do relatório para a forma de pagamento ("" se não se encaixa em nenhum)."""
    method = str(payment_method)
    for key, _label in PAYMENT_BUCKETS:
        if key in method:
            return key
    return ""


def month_name(date_str: str) -> str:
    return MONTH_NAMES[int(date_str[5:7]) - 1]


def filter_expenses(expenses: List[Dict[str, Any]], date_prefix: str, exact: bool = False) -> pd.DataFrame:
    """DataFrame das despesas cuja data começa com `date_prefix` (ou é igual, com `exact`), na ordem original."""
    df = pd.DataFrame(expenses, columns=EXPENSE_FIELDS)
    if df.empty:
        return df
    df["date"] = df["date"].astype(str)
    mask = df["date"] == date_prefix if exact else df["date"].str.startswith(date_prefix)
    df = df[mask].copy()
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0)
    return df


def _payment_totals_section(df: pd.DataFrame) -> str:
    totals = df.groupby(df["paymentMethod"].map(payment_bucket), sort=False)["amount"].sum()
    section = "\nTOTAL POR MÉTODO DE PAGAMENTO:\n"
    for key, label in PAYMENT_BUCKETS:
        value = totals.get(key, 0)
        if value > 0:
            section += f"- {label}: R$ {format_amount(value)}\n"
    return section


def _expense_line(expense: Dict[str, Any], with_day: bool) -> str:
    amount = format_amount(expense["amount"])
    if with_day:
        day_month = f"{expense['date'][8:10]}/{expense['date'][5:7]}"
        return f"- {day_month}: {expense['category']} - {expense['description']} - R$ {amount} ({expense['paymentMethod']})\n"
    return f"- {expense['category']}: {expense['description']} - R$ {amount} ({expense['paymentMethod']})\n"


def generate_daily_summary(expenses: List[Dict[str, Any]], today: datetime.date) -> str:
    df = filter_expenses(expenses, today.strftime("%Y-%m-%d"), exact=True)
    if df.empty:
        return NO_DAILY_EXPENSES

    details = "Aqui está seu Resumo Diário.\n\n"
    for expense in df.to_dict(orient="records"):
        details += _expense_line(expense, with_day=False)
    details += _payment_totals_section(df)
    details += f"\nAté o momento suas despesas diárias somam um total de: R$ {format_amount(df['amount'].sum())}"
    return details


def generate_monthly_summary(expenses: List[Dict[str, Any]], today: datetime.date) -> str:
    df = filter_expenses(expenses, today.strftime("%Y-%m"))
    if df.empty:
        return NO_MONTHLY_EXPENSES

    details = "Aqui está seu Resumo Mensal.\n\n"
    for expense in df.to_dict(orient="records"):
        details += _expense_line(expense, with_day=True)
    details += _payment_totals_section(df)
    details += f"\nAté o momento suas despesas mensais somam um total de: R$ {format_amount(df['amount'].sum())}"
    return details


def generate_annual_summary(expenses: List[Dict[str, Any]], today: datetime.date) -> str:
    df = filter_expenses(expenses, today.strftime("%Y"))
    if df.empty:
        return NO_ANNUAL_EXPENSES

    details = "Aqui está seu Resumo Anual.\n\n"
    for expense in df.to_dict(orient="records"):
        details += _expense_line(expense, with_day=True)

    # Meses na ordem em que aparecem no arquivo, não na ordem do calendário
    month_totals = df.groupby(df["date"].map(month_name), sort=False)["amount"].sum()
    details += "\nTOTAL POR MÊS:\n"
    for name, value in month_totals.items():
        details += f"- {name}: R$ {format_amount(value)}\n"

    details += _payment_totals_section(df)
    details += f"\nAté o momento suas despesas anuais somam um total de: R$ {format_amount(df['amount'].sum())}"
    return details


# --- Atalhos que leem direto do store ---
def daily_summary(store: JsonStore, today: datetime.date) -> str:
    return generate_daily_summary(db.get_expenses(store), today)


def monthly_summary(store: JsonStore, today: datetime.date) -> str:
    return generate_monthly_summary(db.get_expenses(store), today)


def annual_summary(store: JsonStore, today: datetime.date) -> str:
    return generate_annual_summary(db.get_expenses(store), today)
