import pytest

from afd.interpretacao import (
    formatar_data,
    formatar_data_hora,
    interpretar_linha,
    interpretar_registros,
    pesquisar,
    resumo_arquivo,
)
from afd.processador import processar_afd_671, processar_afd_1510
from linhas_afd import (
    ajuste_1510,
    arquivo,
    cabecalho_1510,
    empregado_671,
    empresa_1510,
    evento_671,
    marcacao_671,
    marcacao_1510,
    trailer_1510,
)


@pytest.mark.parametrize(
    "valor, esperado",
    [
        ("2024-01-31", "31-01-2024"),
        ("31012024", "31/01/2024"),
        ("", "Não disponível"),
        (None, "Não disponível"),
        ("31-01", "Inválida"),
    ],
)
def test_formatar_data(valor, esperado):
    assert formatar_data(valor) == esperado


@pytest.mark.parametrize(
    "valor, esperado",
    [
        ("2024-01-15T08:00:00-0300", "15/01/2024 08:00"),
        ("2024-01-15 08:00:00", "15/01/2024 08:00"),
        ("150120240800", "15/01/2024 08:00"),
        ("1501", "Data/Hora inválida"),
    ],
)
def test_formatar_data_hora(valor, esperado):
    assert formatar_data_hora(valor) == esperado


@pytest.mark.parametrize(
    "linha, layout, esperado",
    [
        (
            marcacao_1510(2),
            "1510",
            "NSR: 000000002 - Tipo: Marcação Ponto - Data: 15/01/2024 08:00 | PIS/CPF: 012345678901",
        ),
        (
            marcacao_671(2),
            "671",
            "NSR: 000000002 - Tipo: Marcação Ponto - Data: 15/01/2024 08:00 | PIS/CPF: 012345678901",
        ),
        (
            ajuste_1510(3),
            "1510",
            "NSR: 000000003 - Tipo: Ajuste Relógio - Antes: 15/01/2024 08:00 | Após: 15/01/2024 08:05",
        ),
        (
            empregado_671(4, operacao="E"),
            "671",
            "NSR: 000000004 - Tipo: Exclusão Funcionário - Nome: JOAO DA SILVA | PIS/CPF: 012345678901",
        ),
        (
            evento_671(5, tipo_evento="07"),
            "671",
            "NSR: 000000005 - Tipo: Evento Sensível - Tipo 07 | 15/01/2024 08:00",
        ),
        (
            empresa_1510(1, razao="0001  ACME CORP"),
            "1510",
            "NSR: 000000001 - Tipo: Alteração Empresa - Razão Social: ACME CORP | CNPJ/CPF: 12345678000199",
        ),
        (
            trailer_1510(1, 2, 3, 4),
            "1510",
            "NSR: 999999999 - Tipo: Trailer - Total Tipo 2: 000000001 | Total Tipo 3: 000000002"
            " | Total Tipo 4: 000000003 | Total Tipo 5: 000000004",
        ),
        (
            cabecalho_1510(),
            "1510",
            "NSR: 000000000 - Tipo: Cabeçalho - Data Início: 01/01/2024 | Data Fim: 31/01/2024",
        ),
        (evento_671(5), "1510", "NSR: 000000005 - Tipo: Registro desconhecido"),
        (marcacao_1510(2), "671", "NSR: 000000002 - Tipo: Marcação de ponto para REP-C e REP-A - Formato inválido"),
        ("", "671", "Linha inválida: Dados ausentes"),
    ],
)
def test_interpretar_linha(linha, layout, esperado):
    assert interpretar_linha(linha, layout) == esperado


def test_interpretar_registros_ordena_por_nsr():
    resultado = processar_afd_1510(arquivo(cabecalho_1510(), marcacao_1510(2), ajuste_1510(3), marcacao_1510(4)))
    descricoes = interpretar_registros(resultado, "1510")

    assert [d[:14] for d in descricoes] == [
        "NSR: 000000000",
        "NSR: 000000002",
        "NSR: 000000003",
        "NSR: 000000004",
    ]


def test_pesquisar_ignora_maiusculas_e_omite_tipos_sem_resultado():
    resultado = processar_afd_1510(
        arquivo(empresa_1510(1, razao="Acme Corp"), marcacao_1510(2), marcacao_1510(3, pis="999999999999"))
    )

    assert pesquisar(resultado, "ACME") == {"2": [empresa_1510(1, razao="Acme Corp")]}
    assert pesquisar(resultado, "999999999999") == {"3": [marcacao_1510(3, pis="999999999999")]}
    assert pesquisar(resultado, "   ") == {}


def test_resumo_arquivo_1510():
    resultado = processar_afd_1510(
        arquivo(cabecalho_1510(), empresa_1510(1), marcacao_1510(2), trailer_1510(1, 1, 0, 0), "lixo")
    )
    resumo = resumo_arquivo(resultado, "1510")

    assert resumo["dataHoraGeracao"] == "01/02/2024 08:30"
    assert resumo["dataInicio"] == "01/01/2024"
    assert resumo["quantidades"] == {"2": 1, "3": 1, "4": 0, "5": 0, "9": 1}
    assert resumo["totalLinhasInvalidas"] == 1
    assert resumo["ultimaAlteracaoEmpresa"]["razaoSocial"] == "ACME CORP"


def test_resumo_arquivo_671_sem_cabecalho():
    resultado = processar_afd_671(arquivo(marcacao_671(1)))
    resumo = resumo_arquivo(resultado, "671")

    assert resumo["serialEquipamento"] == "Não disponível"
    assert resumo["dataHoraGeracao"] == "Não disponível"
    assert resumo["dataInicio"] == "Não disponível"
    assert resumo["quantidades"] == {"2": 0, "3": 1, "4": 0, "5": 0, "6": 0}
    assert resumo["ultimaAlteracaoEmpresa"] is None
