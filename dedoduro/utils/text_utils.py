# dedoduro/utils/text_utils.py
import re
from typing import NamedTuple, Union

from dedoduro.core.models import EXPENSE_CATEGORIES, PAYMENT_METHOD_ALIASES, PAYMENT_METHODS

# "Descrição valor [reais]" - despesas e despesas/receitas fixas
AMOUNT_PATTERN = re.compile(r"(.+)\s+(\d+(?:[.,]\d+)?)\s*(reais|real|r\$)?", re.IGNORECASE)

# "Descrição: valor [reais]" - receitas
INCOME_PATTERN = re.compile(r"(.+):\s*(\d+(?:[.,]\d+)?)\s*(reais|real|r\$)?", re.IGNORECASE)

DATE_PATTERN = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")

LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


class ParsedEntry(NamedTuple):
    description: str
    amount: float


def parse_decimal(value: str) -> float:
    """Converte "45,50" ou "45.50" para 45.5."""
    return float(value.replace(",", "."))


def _parse_with(pattern: re.Pattern, text: str) -> Union[ParsedEntry, None]:
    if not text:
        return None
    match = pattern.search(text)
    if not match:
        return None
    return ParsedEntry(match.group(1).strip(), parse_decimal(match.group(2)))


def parse_amount_text(text: str) -> Union[ParsedEntry, None]:
    """Extrai descrição e valor de "Mercado 120 reais"."""
    return _parse_with(AMOUNT_PATTERN, text)


def parse_income_text(text: str) -> Union[ParsedEntry, None]:
    """Extrai descrição e valor de "Salário: 3500,00"."""
    return _parse_with(INCOME_PATTERN, text)


def parse_category(text: str) -> Union[str, None]:
    """Retorna a categoria com a primeira letra maiúscula, ou None se não for válida."""
    category = text.lower()
    if category not in EXPENSE_CATEGORIES:
        return None
    return category[0].upper() + category[1:]


def parse_payment_method(text: str) -> Union[str, None]:
    method = text.lower()
    if method in PAYMENT_METHOD_ALIASES:
        return PAYMENT_METHOD_ALIASES[method]
    if method in PAYMENT_METHODS:
        return method
    return None


def parse_int(text: str) -> Union[int, None]:
    """Lê o inteiro no começo do texto ("15", "15 de cada mês"), como um parseInt."""
    match = LEADING_INT_PATTERN.match(text or "")
    if not match:
        return None
    return int(match.group(1))


def parse_day(text: str) -> Union[int, None]:
    """Dia do mês entre 1 e 31, ou None."""
    day = parse_int(text)
    if day is None or day < 1 or day > 31:
        return None
    return day


def parse_index(text: str, size: int) -> Union[int, None]:
    """Converte a escolha 1-based do usuário em índice 0-based válido para uma lista de `size` itens."""
    number = parse_int(text)
    if number is None:
        return None
    index = number - 1
    if index < 0 or index >= size:
        return None
    return index


def parse_br_date(text: str) -> Union[str, None]:
    """Converte "5/3/2025" para "2025-03-05"."""
    match = DATE_PATTERN.search(text or "")
    if not match:
        return None
    day = match.group(1).zfill(2)
    month = match.group(2).zfill(2)
    year = match.group(3)
    return f"{year}-{month}-{day}"


def format_amount(amount: float) -> str:
    """Valor com duas casas decimais: 45.5 -> "45.50"."""
    return f"{float(amount):.2f}"


def format_plain_amount(amount: float) -> str:
    """Valor como o usuário digitou depois de normalizado: 120.0 -> "120", 45.5 -> "45.5"."""
    amount = float(amount)
    if amount.is_integer():
        return str(int(amount))
    return repr(amount)
