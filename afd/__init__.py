"""Validadores de arquivos AFD (Portaria 671 e Portaria 1510)."""

from .base import decodificar_arquivo, limpar_razao_social
from .classificador import classificar_linha
from .exceptions import ErroAFD, ErroLeituraAFD, LayoutDesconhecidoError
from .interpretacao import (
    formatar_data,
    formatar_data_hora,
    interpretar_linha,
    interpretar_registros,
    pesquisar,
    resumo_arquivo,
)
from .layouts import LAYOUT_671, LAYOUT_1510, LAYOUTS, LayoutAFD, obter_layout
from .processador import (
    ler_conteudo,
    processar_afd,
    processar_afd_671,
    processar_afd_1510,
)

__all__ = [
    "ErroAFD",
    "ErroLeituraAFD",
    "LayoutDesconhecidoError",
    "LAYOUT_671",
    "LAYOUT_1510",
    "LAYOUTS",
    "LayoutAFD",
    "obter_layout",
    "classificar_linha",
    "limpar_razao_social",
    "decodificar_arquivo",
    "ler_conteudo",
    "processar_afd",
    "processar_afd_671",
    "processar_afd_1510",
    "formatar_data",
    "formatar_data_hora",
    "interpretar_linha",
    "interpretar_registros",
    "pesquisar",
    "resumo_arquivo",
]
