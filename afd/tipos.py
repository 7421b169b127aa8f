"""
Validações por tipo de registro.

As regras são as mesmas para as duas portarias; as posições dos campos e os
valores aceitos vêm do descritor de layout.
"""

import re

from .base import campo, somente_digitos
from .layouts import (
    NSR_CABECALHO,
    NSR_TRAILER,
    OPERACOES_EMPREGADO,
    TIPO_CABECALHO,
    TIPO_EMPREGADO,
    TIPO_EMPRESA,
    TIPO_MARCACAO,
    TIPO_TRAILER,
)

TAMANHO_PIS = 12
TAMANHO_ID_EMPREGADOR = 14

_RE_DATA_HORA_COMPACTA = re.compile(r"[0-9]{8}[0-9]{4}")


def _validar_cabecalho(linha, layout):
    if linha[:9] != NSR_CABECALHO:
        return f"cabeçalho com NSR diferente de {NSR_CABECALHO}"
    marcador = campo(linha, layout.campo_marcador_cabecalho)
    if marcador not in layout.marcadores_cabecalho:
        return (
            f"cabeçalho com identificador '{marcador}' "
            f"(esperado um de {sorted(layout.marcadores_cabecalho)})"
        )
    return None


def _validar_empresa(linha, layout):
    if layout.campo_subcodigo_empresa is None:
        return None
    subcodigo = campo(linha, layout.campo_subcodigo_empresa)
    posicao_id = layout.campos_id_empresa.get(subcodigo)
    if posicao_id is None:
        return f"empresa com tipo de identificador '{subcodigo}' não reconhecido"
    if not somente_digitos(campo(linha, posicao_id), TAMANHO_ID_EMPREGADOR):
        return f"empresa com CNPJ/CPF que não tem {TAMANHO_ID_EMPREGADOR} dígitos"
    return None


def _validar_marcacao(linha, layout):
    if not somente_digitos(campo(linha, layout.campo_pis_marcacao), TAMANHO_PIS):
        return f"marcação com PIS/CPF que não tem {TAMANHO_PIS} dígitos"
    if layout.valida_data_hora_marcacao:
        data_hora = campo(linha, layout.campo_data_hora_marcacao)
        if not _RE_DATA_HORA_COMPACTA.fullmatch(data_hora):
            return "marcação com data/hora fora do formato DDMMAAAAHHMM"
    return None


def _validar_empregado(linha, layout):
    if not somente_digitos(campo(linha, layout.campo_pis_empregado), TAMANHO_PIS):
        return f"empregado com PIS/CPF que não tem {TAMANHO_PIS} dígitos"
    operacao = campo(linha, layout.campo_operacao_empregado)
    if operacao not in OPERACOES_EMPREGADO:
        return f"empregado com operação '{operacao}' inválida (esperado I, A ou E)"
    return None


def _validar_trailer(linha, layout):
    if linha[:9] != NSR_TRAILER:
        return f"trailer com NSR diferente de {NSR_TRAILER}"
    return None


_VALIDACOES_POR_TIPO = {
    TIPO_CABECALHO: _validar_cabecalho,
    TIPO_EMPRESA: _validar_empresa,
    TIPO_MARCACAO: _validar_marcacao,
    TIPO_EMPREGADO: _validar_empregado,
    TIPO_TRAILER: _validar_trailer,
}


def validar_registro(linha, tipo, layout):
    """
    Decide se a linha pode entrar no grupo do seu tipo.
    Retorna a mensagem com o motivo da rejeição ou ``None`` se a linha é válida.
    """
    if not layout.reconhece(tipo):
        return f"tipo de registro '{tipo}' não reconhecido na {layout.nome}"

    tamanho_minimo = layout.tamanho_minimo(tipo)
    if len(linha) < tamanho_minimo:
        return f"registro tipo {tipo} com {len(linha)} caracteres (mínimo {tamanho_minimo})"

    validacao = _VALIDACOES_POR_TIPO.get(tipo)
    if validacao is None:
        return None
    return validacao(linha, layout)
