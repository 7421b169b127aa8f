"""
Processamento de arquivos AFD.

Fluxo de uma execução: cada linha não vazia é classificada (NSR + tipo),
passa pela validação de sequência e pela validação do tipo e termina no grupo
do seu tipo ou nas linhas inválidas. Depois de consumir todas as linhas, os
metadados do cabeçalho são extraídos (com a checagem do número serial), o
trailer é conferido e o resultado é montado.
"""

import logging

from .base import aparar_linha, dividir_linhas
from .classificador import classificar_linha
from .exceptions import ErroLeituraAFD
from .layouts import LAYOUT_671, LAYOUT_1510, obter_layout
from .metadados import extrair_metadados, extrair_ultima_alteracao_empresa
from .resultado import ContextoValidacao, montar_resultado
from .sequencia import validar_sequencia
from .tipos import validar_registro
from .trailer import reconciliar_trailer

logger = logging.getLogger(__name__)


def ler_conteudo(fonte):
    """
    Obtém o texto do arquivo a partir de ``str``, ``bytes`` ou de um objeto com
    ``read()``. Bytes precisam ser UTF-8 válido; a conversão de outros
    encodings é feita antes de chegar aqui.
    """
    if hasattr(fonte, "read"):
        try:
            fonte = fonte.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ErroLeituraAFD(f"Falha ao ler o arquivo AFD: {exc}") from exc

    if isinstance(fonte, (bytes, bytearray)):
        try:
            return bytes(fonte).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ErroLeituraAFD(
                f"Conteúdo do arquivo AFD não é UTF-8 válido (posição {exc.start})."
            ) from exc

    if isinstance(fonte, str):
        return fonte

    raise ErroLeituraAFD(
        f"Fonte do arquivo AFD de tipo não suportado: {type(fonte).__name__}."
    )


def processar_linha(contexto, linha):
    nsr, tipo = classificar_linha(linha)

    erro = validar_sequencia(contexto, nsr, tipo)
    if erro is None:
        erro = validar_registro(linha, tipo, contexto.layout)

    if erro is None:
        contexto.aceitar(tipo, linha)
    else:
        contexto.rejeitar(linha, erro)


def processar_afd(fonte, layout="671"):
    """
    Valida e classifica um arquivo AFD no layout informado.

    Retorna um dicionário com ``registros`` (linhas aceitas por tipo),
    ``linhasInvalidas``, ``totalLinhas``, os metadados do cabeçalho e
    ``ultimaAlteracaoEmpresa``. Só levanta ``ErroLeituraAFD`` (fonte ilegível)
    ou ``LayoutDesconhecidoError``; problemas nas linhas nunca interrompem o
    processamento.
    """
    layout = obter_layout(layout)
    texto = ler_conteudo(fonte)

    linhas = dividir_linhas(texto)
    contexto = ContextoValidacao(layout=layout, total_linhas=len(linhas))

    for linha in linhas:
        linha = aparar_linha(linha)
        if not linha:
            continue
        processar_linha(contexto, linha)

    extrair_metadados(contexto)
    extrair_ultima_alteracao_empresa(contexto)
    reconciliar_trailer(contexto)

    logger.info(
        "AFD %s processado: %d linhas, %d registros válidos, %d linhas inválidas.",
        layout.nome,
        contexto.total_linhas,
        contexto.total_registros_validos,
        len(contexto.linhas_invalidas),
    )
    return montar_resultado(contexto)


def processar_afd_671(fonte):
    return processar_afd(fonte, LAYOUT_671)


def processar_afd_1510(fonte):
    return processar_afd(fonte, LAYOUT_1510)
