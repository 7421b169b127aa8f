"""Utilitários compartilhados pelos validadores AFD."""

import logging
import re

logger = logging.getLogger(__name__)

# Caracteres removidos pelo trim das linhas (espaço, tab, quebras, NUL e tab vertical)
CARACTERES_TRIM = " \t\n\r\0\x0b"

_RE_DIGITOS = re.compile(r"[0-9]+")
_RE_PREFIXO_NUMERICO = re.compile(r"^[0-9]+\s*")
_RE_CONTROLE = re.compile(r"[\x00-\x1f\x7f]")


def decodificar_arquivo(conteudo):
    """
    Converte o conteúdo bruto do arquivo para texto antes da validação.
    Arquivos que não são UTF-8 válido são lidos como ISO-8859-1.
    """
    try:
        return conteudo.decode("utf-8")
    except UnicodeDecodeError:
        logger.info("Arquivo não é UTF-8; convertendo de ISO-8859-1.")
        return conteudo.decode("iso-8859-1")


def dividir_linhas(texto):
    """
    Remove os \\r e divide o conteúdo em linhas físicas.
    Linhas vazias (inclusive a que sobra depois da última quebra) são mantidas.
    """
    return texto.replace("\r", "").split("\n")


def aparar_linha(linha):
    return linha.strip(CARACTERES_TRIM)


def campo(linha: str, posicao) -> str:
    """
    Retorna o trecho da linha na posição (inicio, fim) informada (base 0, fim exclusivo).
    Linhas mais curtas devolvem o trecho truncado ou vazio.
    """
    inicio, fim = posicao
    return linha[inicio:fim]


def somente_digitos(valor: str, tamanho=None) -> bool:
    """
    Verdadeiro se o valor for composto só de dígitos ASCII
    (e, quando informado, tiver exatamente ``tamanho`` caracteres).
    """
    if not valor or not _RE_DIGITOS.fullmatch(valor):
        return False
    return tamanho is None or len(valor) == tamanho


def limpar_razao_social(razao_social: str) -> str:
    """
    Limpa a razão social vinda do registro tipo 2:
    - remove espaços nas pontas;
    - remove o prefixo numérico (e os espaços seguintes) deixado pela conversão de encoding;
    - remove caracteres de controle.
    """
    razao_social = (razao_social or "").strip()
    razao_social = _RE_PREFIXO_NUMERICO.sub("", razao_social)
    return _RE_CONTROLE.sub("", razao_social)
