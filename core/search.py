# search.py
# Filtro da barra de pesquisa (nome ou telefone)

from typing import List, Sequence

from core.models import Customer


def filter_customers(records: Sequence[Customer], query: str) -> List[Customer]:
    """
    Filtra clientes pelo texto digitado.

    Nome é comparado sem diferenciar maiúsculas/minúsculas; telefone é
    comparado exatamente como digitado. Pesquisa vazia retorna todos, na
    ordem original.
    """
    if not query:
        return list(records)
    folded = query.lower()
    return [
        c for c in records
        if folded in c.name.lower() or query in c.phone
    ]
