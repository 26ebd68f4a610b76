"""
Montagem da query string dos filtros de solicitações
"""
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote


@dataclass
class FiltroSolicitacoes:
    """
    Filtros da listagem de solicitações

    A query gerada sempre contém os três parâmetros, na ordem
    document_name, ra, priority. Filtro não preenchido vai apenas com
    o nome do parâmetro (ex: ?document_name&ra=123&priority).
    """
    document_name: Optional[str] = None
    ra: Optional[str] = None
    priority: bool = False

    def parametros(self) -> list[tuple[str, Optional[str]]]:
        ra = self.ra.strip() if self.ra else None
        return [
            ("document_name", self.document_name or None),
            ("ra", ra or None),
            ("priority", "1" if self.priority else None),
        ]

    def como_query(self) -> str:
        partes = []
        for nome, valor in self.parametros():
            partes.append(f"{nome}={quote(valor, safe='')}" if valor else nome)
        return "&".join(partes)
