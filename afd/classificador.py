"""Classificação de linhas AFD: extrai NSR e tipo de registro."""

from .base import somente_digitos

TAMANHO_NSR = 9


def classificar_linha(linha):
    """
    Devolve ``(nsr, tipo)`` de uma linha já aparada.

    O NSR são os 9 primeiros caracteres, convertido para ``int`` quando numérico
    e mantido como texto caso contrário. O tipo é o caractere seguinte; linhas
    com menos de 10 caracteres retornam tipo vazio (tipo desconhecido).
    """
    nsr_bruto = linha[:TAMANHO_NSR]
    tipo = linha[TAMANHO_NSR:TAMANHO_NSR + 1]
    nsr = int(nsr_bruto) if somente_digitos(nsr_bruto) else nsr_bruto
    return nsr, tipo
