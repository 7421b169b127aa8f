"""Conferência das quantidades declaradas no trailer."""

import logging

from .base import campo, somente_digitos

logger = logging.getLogger(__name__)


def ler_contagens_trailer(trailer, layout):
    """
    Quantidades declaradas por tipo. Campos não numéricos ficam como ``None``.
    """
    contagens = {}
    for tipo, posicao in (layout.contagens_trailer or {}).items():
        valor = campo(trailer, posicao)
        contagens[tipo] = int(valor) if somente_digitos(valor) else None
    return contagens


def reconciliar_trailer(contexto):
    """
    Compara as quantidades do primeiro trailer aceito com o número de registros
    aceitos de cada tipo. Em caso de divergência o trailer é movido para as
    linhas inválidas. Retorna ``True``/``False`` ou ``None`` quando não há trailer.
    """
    layout = contexto.layout
    tipo_trailer = layout.tipo_trailer
    if tipo_trailer is None:
        return None

    trailers = contexto.registros.get(tipo_trailer) or []
    if not trailers:
        return None

    trailer = trailers[0]
    divergencias = []
    for tipo, declarado in ler_contagens_trailer(trailer, layout).items():
        encontrado = len(contexto.registros.get(tipo, []))
        if declarado != encontrado:
            divergencias.append(f"tipo {tipo}: declarado {declarado}, encontrado {encontrado}")

    if divergencias:
        contexto.remover_registro(
            tipo_trailer,
            trailer,
            "quantidades do trailer divergentes (" + "; ".join(divergencias) + ")",
        )
        return False

    logger.debug("Trailer conferido: quantidades batem com os registros aceitos.")
    return True
