"""Utilitario de linha de comando para o validador AFD."""

import logging
import os
import sys

from .base import decodificar_arquivo
from .exceptions import LayoutDesconhecidoError
from .interpretacao import interpretar_registros, resumo_arquivo
from .layouts import LAYOUTS, obter_layout
from .processador import processar_afd


def _configurar_logging():
    nivel = os.environ.get("AFD_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, nivel, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def imprimir_resumo(resultado, layout):
    resumo = resumo_arquivo(resultado, layout)
    print("\n=== Detalhes do arquivo ===")
    print(f"Data e hora da geracao do arquivo: {resumo['dataHoraGeracao']}")
    print(f"Quantidade de linhas no arquivo: {resumo['totalLinhas']}")
    for tipo, quantidade in resumo["quantidades"].items():
        descricao = layout.tipos[tipo].descricao
        print(f"Quantidade de registros Tipo {tipo} ({descricao}): {quantidade}")
    print(f"\nNumero serial do equipamento: {resumo['serialEquipamento']}")
    print(f"Data de inicio dos eventos: {resumo['dataInicio']}")
    print(f"Data de fim dos eventos: {resumo['dataFim']}")

    empresa = resumo["ultimaAlteracaoEmpresa"]
    if empresa:
        print("\nUltima alteracao da empresa:")
        print(f"Data e hora da gravacao: {empresa['dataHoraGravacao']}")
        print(f"CNPJ/CPF do empregador: {empresa['cnpjCpfEmpregador']}")
        print(f"Razao social: {empresa['razaoSocial']}")


def main(argv=None):
    _configurar_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    interpretar = "--interpretar" in args
    args = [arg for arg in args if arg != "--interpretar"]

    print("=== Validador de arquivos AFD (Portaria 671 / 1510) ===")
    caminho = args[0] if args else input("Informe o caminho completo do arquivo AFD: ").strip()

    if not os.path.isfile(caminho):
        print("Erro: arquivo nao encontrado. Verifique o caminho e tente novamente.")
        return 1

    seletor = args[1] if len(args) > 1 else input(
        f"Informe a portaria do arquivo ({' / '.join(LAYOUTS)}): "
    ).strip()
    try:
        layout = obter_layout(seletor)
    except LayoutDesconhecidoError as exc:
        print(f"Erro: {exc}")
        return 1

    try:
        with open(caminho, "rb") as f:
            texto = decodificar_arquivo(f.read())
    except OSError as exc:
        print(f"Erro ao ler o arquivo: {exc}")
        return 1

    resultado = processar_afd(texto, layout)

    print(f"OK. Layout: {layout.nome}")
    imprimir_resumo(resultado, layout)

    if resultado["linhasInvalidas"]:
        print(f"\nLinhas invalidas ({len(resultado['linhasInvalidas'])}):")
        for linha in resultado["linhasInvalidas"]:
            print("   -", linha)
    else:
        print("\nNenhuma linha invalida encontrada.")

    if interpretar:
        print("\n=== Linhas interpretadas ===")
        for descricao in interpretar_registros(resultado, layout):
            print(descricao)

    return 0


if __name__ == "__main__":
    sys.exit(main())
