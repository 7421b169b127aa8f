"""Extração dos metadados do cabeçalho e da última alteração da empresa."""

import logging

from .base import campo, limpar_razao_social, somente_digitos
from .layouts import TIPO_CABECALHO, TIPO_EMPRESA

logger = logging.getLogger(__name__)

TAMANHO_SERIAL = 17

CAMPOS_METADADOS = (
    "dataInicio",
    "dataFim",
    "dataHoraGeracao",
    "serialEquipamento",
    "cnpjCpfEmpregador",
)


def metadados_indisponiveis():
    return {nome: None for nome in CAMPOS_METADADOS}


def ler_metadados_cabecalho(cabecalho, layout):
    """Lê os campos do cabeçalho nas posições do layout, sem validar."""
    return {
        "dataInicio": campo(cabecalho, layout.campo_data_inicio),
        "dataFim": campo(cabecalho, layout.campo_data_fim),
        "dataHoraGeracao": campo(cabecalho, layout.campo_data_hora_geracao).strip(),
        "serialEquipamento": campo(cabecalho, layout.campo_serial),
        "cnpjCpfEmpregador": campo(cabecalho, layout.campo_empregador_cabecalho).strip(),
    }


def extrair_metadados(contexto):
    """
    Preenche ``contexto.metadados`` a partir do primeiro cabeçalho aceito.

    O número serial do equipamento precisa ter 17 dígitos; se não tiver, o
    cabeçalho sai do grupo tipo 1, vai para as linhas inválidas e os
    metadados ficam indisponíveis.
    """
    cabecalhos = contexto.registros.get(TIPO_CABECALHO) or []
    if not cabecalhos:
        logger.info("Nenhum cabeçalho aceito; metadados do arquivo indisponíveis.")
        contexto.metadados = metadados_indisponiveis()
        return contexto.metadados

    cabecalho = cabecalhos[0]
    metadados = ler_metadados_cabecalho(cabecalho, contexto.layout)

    if not somente_digitos(metadados["serialEquipamento"], TAMANHO_SERIAL):
        contexto.remover_registro(
            TIPO_CABECALHO,
            cabecalho,
            f"número serial '{metadados['serialEquipamento']}' não tem {TAMANHO_SERIAL} dígitos",
        )
        metadados = metadados_indisponiveis()

    contexto.metadados = metadados
    return metadados


def extrair_ultima_alteracao_empresa(contexto):
    """Dados do último registro tipo 2 aceito, ou ``None`` se não houver nenhum."""
    empresas = contexto.registros.get(TIPO_EMPRESA) or []
    if not empresas:
        contexto.ultima_alteracao_empresa = None
        return None

    layout = contexto.layout
    ultimo = empresas[-1]
    contexto.ultima_alteracao_empresa = {
        "dataHoraGravacao": campo(ultimo, layout.campo_data_hora_gravacao).strip(),
        "cnpjCpfEmpregador": campo(ultimo, layout.campo_empregador_empresa).strip(),
        "razaoSocial": limpar_razao_social(campo(ultimo, layout.campo_razao_social)),
    }
    return contexto.ultima_alteracao_empresa
