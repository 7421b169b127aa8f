"""Interpretação legível das linhas e resumo do arquivo AFD já processado."""

import re

from .base import campo, limpar_razao_social, somente_digitos
from .layouts import (
    OPERACOES_EMPREGADO,
    TIPO_AJUSTE_RELOGIO,
    TIPO_CABECALHO,
    TIPO_EMPREGADO,
    TIPO_EMPRESA,
    TIPO_EVENTO_SENSIVEL,
    TIPO_MARCACAO,
    TIPO_TRAILER,
    obter_layout,
)

NAO_DISPONIVEL = "Não disponível"
DATA_INVALIDA = "Inválida"
DATA_HORA_INVALIDA = "Data/Hora inválida"

_RE_DATA_ISO = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_RE_DATA_COMPACTA = re.compile(r"(\d{2})(\d{2})(\d{4})")
_RE_DATA_HORA_ISO = re.compile(r"(\d{4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2})")
_RE_DATA_HORA_COMPACTA = re.compile(r"(\d{2})(\d{2})(\d{4})(\d{2})(\d{2})")


def formatar_data(valor):
    """
    AAAA-MM-DD (671) -> DD-MM-AAAA; DDMMAAAA (1510) -> DD/MM/AAAA.
    """
    valor = (valor or "").strip()
    if not valor:
        return NAO_DISPONIVEL
    m = _RE_DATA_ISO.fullmatch(valor)
    if m:
        ano, mes, dia = m.groups()
        return f"{dia}-{mes}-{ano}"
    m = _RE_DATA_COMPACTA.fullmatch(valor)
    if m:
        dia, mes, ano = m.groups()
        return f"{dia}/{mes}/{ano}"
    return DATA_INVALIDA


def formatar_data_hora(valor, padrao=DATA_HORA_INVALIDA):
    """
    AAAA-MM-DDThh:mm... (671) ou DDMMAAAAhhmm (1510) -> DD/MM/AAAA hh:mm.
    """
    valor = (valor or "").strip()
    m = _RE_DATA_HORA_ISO.match(valor)
    if m:
        ano, mes, dia, hora, minuto = m.groups()
        return f"{dia}/{mes}/{ano} {hora}:{minuto}"
    m = _RE_DATA_HORA_COMPACTA.match(valor)
    if m:
        dia, mes, ano, hora, minuto = m.groups()
        return f"{dia}/{mes}/{ano} {hora}:{minuto}"
    return padrao


def interpretar_linha(linha, layout="671"):
    """Descreve em texto uma linha AFD conforme o tipo de registro."""
    layout = obter_layout(layout)
    if not linha:
        return "Linha inválida: Dados ausentes"

    tipo = linha[9:10]
    descricao = f"NSR: {linha[:9].strip()} - Tipo: "

    if not layout.reconhece(tipo):
        return descricao + "Registro desconhecido"
    if len(linha) < layout.tamanho_minimo(tipo):
        return descricao + f"{layout.tipos[tipo].descricao} - Formato inválido"

    if tipo == TIPO_CABECALHO:
        descricao += (
            f"Cabeçalho - Data Início: {formatar_data(campo(linha, layout.campo_data_inicio))}"
            f" | Data Fim: {formatar_data(campo(linha, layout.campo_data_fim))}"
        )
    elif tipo == TIPO_EMPRESA:
        razao = limpar_razao_social(campo(linha, layout.campo_razao_social)) or NAO_DISPONIVEL
        descricao += (
            f"Alteração Empresa - Razão Social: {razao}"
            f" | CNPJ/CPF: {campo(linha, layout.campo_empregador_empresa).strip()}"
        )
    elif tipo == TIPO_MARCACAO:
        descricao += (
            f"Marcação Ponto - Data: "
            f"{formatar_data_hora(campo(linha, layout.campo_data_hora_marcacao))}"
            f" | PIS/CPF: {campo(linha, layout.campo_pis_marcacao).strip()}"
        )
    elif tipo == TIPO_AJUSTE_RELOGIO:
        descricao += (
            f"Ajuste Relógio - Antes: {formatar_data_hora(campo(linha, layout.campo_ajuste_antes))}"
            f" | Após: {formatar_data_hora(campo(linha, layout.campo_ajuste_depois))}"
        )
    elif tipo == TIPO_EMPREGADO:
        operacao = OPERACOES_EMPREGADO.get(
            campo(linha, layout.campo_operacao_empregado), "Operação desconhecida"
        )
        descricao += (
            f"{operacao} Funcionário - Nome: {campo(linha, layout.campo_nome_empregado).strip()}"
            f" | PIS/CPF: {campo(linha, layout.campo_pis_empregado).strip()}"
        )
    elif tipo == TIPO_EVENTO_SENSIVEL:
        descricao += (
            f"Evento Sensível - Tipo {campo(linha, layout.campo_tipo_evento)}"
            f" | {formatar_data_hora(campo(linha, layout.campo_data_hora_evento))}"
        )
    elif tipo == TIPO_TRAILER:
        totais = " | ".join(
            f"Total Tipo {tipo_contado}: {campo(linha, posicao).strip()}"
            for tipo_contado, posicao in layout.contagens_trailer.items()
        )
        descricao += f"Trailer - {totais}"

    return descricao


def _chave_nsr(linha):
    nsr = linha[:9]
    return int(nsr) if somente_digitos(nsr) else 0


def interpretar_registros(resultado, layout="671"):
    """Interpreta todas as linhas aceitas, ordenadas pelo NSR."""
    layout = obter_layout(layout)
    todas = [linha for linhas in resultado["registros"].values() for linha in linhas]
    todas.sort(key=_chave_nsr)
    return [interpretar_linha(linha, layout) for linha in todas]


def pesquisar(resultado, termo):
    """
    Linhas aceitas que contêm o termo (sem diferenciar maiúsculas), agrupadas
    por tipo. Tipos sem ocorrência ficam de fora.
    """
    termo = (termo or "").strip().lower()
    if not termo:
        return {}
    encontrados = {}
    for tipo, linhas in resultado["registros"].items():
        filtradas = [linha for linha in linhas if termo in linha.lower()]
        if filtradas:
            encontrados[tipo] = filtradas
    return encontrados


def resumo_arquivo(resultado, layout="671"):
    """Detalhes do arquivo: datas, serial, quantidades por tipo e última alteração da empresa."""
    layout = obter_layout(layout)
    resumo = {
        "dataHoraGeracao": formatar_data_hora(resultado.get("dataHoraGeracao"), NAO_DISPONIVEL),
        "totalLinhas": resultado.get("totalLinhas", 0),
        "serialEquipamento": resultado.get("serialEquipamento") or NAO_DISPONIVEL,
        "dataInicio": formatar_data(resultado.get("dataInicio")),
        "dataFim": formatar_data(resultado.get("dataFim")),
        "quantidades": {
            tipo: len(resultado["registros"].get(tipo, []))
            for tipo in layout.tipos
            if tipo != TIPO_CABECALHO
        },
        "totalLinhasInvalidas": len(resultado.get("linhasInvalidas", [])),
        "ultimaAlteracaoEmpresa": None,
    }

    empresa = resultado.get("ultimaAlteracaoEmpresa")
    if empresa:
        resumo["ultimaAlteracaoEmpresa"] = {
            "dataHoraGravacao": formatar_data_hora(empresa.get("dataHoraGravacao"), NAO_DISPONIVEL),
            "cnpjCpfEmpregador": empresa.get("cnpjCpfEmpregador") or NAO_DISPONIVEL,
            "razaoSocial": empresa.get("razaoSocial") or NAO_DISPONIVEL,
        }
    return resumo
