import pytest

from afd.base import (
    aparar_linha,
    campo,
    decodificar_arquivo,
    dividir_linhas,
    limpar_razao_social,
    somente_digitos,
)
from afd.classificador import classificar_linha


@pytest.mark.parametrize(
    "valor, esperado",
    [
        ("0001  ACME CORP\x07", "ACME CORP"),
        ("  EMPRESA LTDA   ", "EMPRESA LTDA"),
        ("123EMPRESA", "EMPRESA"),
        ("EMPRESA 2000", "EMPRESA 2000"),
        ("\x01ACME\x1f", "ACME"),
        ("", ""),
        (None, ""),
    ],
)
def test_limpar_razao_social(valor, esperado):
    assert limpar_razao_social(valor) == esperado


@pytest.mark.parametrize(
    "valor, tamanho, esperado",
    [
        ("012345678901", 12, True),
        ("01234567890", 12, False),
        ("01234567890A", 12, False),
        ("０１２", None, False),
        ("", None, False),
        ("42", None, True),
    ],
)
def test_somente_digitos(valor, tamanho, esperado):
    assert somente_digitos(valor, tamanho) is esperado


@pytest.mark.parametrize(
    "linha, esperado",
    [
        ("0000000013ABC", (1, "3")),
        ("000000000", (0, "")),
        ("12345", (12345, "")),
        ("ABCDEFGHI2", ("ABCDEFGHI", "2")),
        ("00000001X5", ("00000001X", "5")),
    ],
)
def test_classificar_linha(linha, esperado):
    assert classificar_linha(linha) == esperado


def test_dividir_linhas_mantem_vazias_e_remove_cr():
    assert dividir_linhas("a\r\n\r\nb\r\n") == ["a", "", "b", ""]


def test_aparar_linha_e_campo():
    linha = aparar_linha("\t 0000000013ABC \r\x00")
    assert linha == "0000000013ABC"
    assert campo(linha, (9, 10)) == "3"
    assert campo(linha, (20, 30)) == ""


@pytest.mark.parametrize("encoding", ["utf-8", "iso-8859-1"])
def test_decodificar_arquivo(encoding):
    assert decodificar_arquivo("AÇÚCAR UNIÃO".encode(encoding)) == "AÇÚCAR UNIÃO"
