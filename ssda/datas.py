"""
Funções de conversão e validação de datas no formato brasileiro.

As datas trafegam na API como texto dd/mm/aaaa (ex: 25/12/2025) e são
armazenadas como DATE no banco.
"""
import re
from datetime import date, datetime

from .erros import DataInvalida, DataNoPassado

FORMATO_DATA = "%d/%m/%Y"

_PADRAO_DATA = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def parse_data_br(texto: str) -> date:
    """
    Converte um texto dd/mm/aaaa em date.

    Levanta DataInvalida se o texto não representar uma data real
    do calendário (ex: 31/02/2030 ou máscara incompleta __/__/____).
    """
    if not texto or not _PADRAO_DATA.match(texto.strip()):
        raise DataInvalida("Esta não é uma data válida")
    try:
        return datetime.strptime(texto.strip(), FORMATO_DATA).date()
    except ValueError:
        raise DataInvalida("Esta não é uma data válida")


def formatar_data_br(valor: date | None) -> str | None:
    if valor is None:
        return None
    return valor.strftime(FORMATO_DATA)


def validar_data_prevista(texto: str, hoje: date | None = None) -> date:
    """Valida a data prevista de conclusão: deve ser hoje ou uma data futura."""
    data = parse_data_br(texto)
    if data < (hoje or date.today()):
        raise DataNoPassado("Não é permitido atualizar para uma data inferior a de hoje.")
    return data
