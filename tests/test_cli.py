from afd.cli import main
from linhas_afd import arquivo, cabecalho_1510, empresa_1510, marcacao_1510, trailer_1510


def _gravar_afd(tmp_path, *linhas):
    caminho = tmp_path / "AFD00004004330001234.txt"
    caminho.write_text(arquivo(*linhas), encoding="utf-8")
    return caminho


def test_cli_imprime_resumo_e_linhas_invalidas(tmp_path, capsys):
    caminho = _gravar_afd(
        tmp_path,
        cabecalho_1510(),
        empresa_1510(1, razao="0001  ACME CORP"),
        marcacao_1510(2),
        "lixo",
        trailer_1510(1, 1, 0, 0),
    )

    assert main([str(caminho), "1510"]) == 0

    saida = capsys.readouterr().out
    assert "OK. Layout: Portaria 1510" in saida
    assert "Razao social: ACME CORP" in saida
    assert "Quantidade de registros Tipo 3 (Marcação de ponto): 1" in saida
    assert "   - lixo" in saida
    assert "Linhas interpretadas" not in saida


def test_cli_interpretar(tmp_path, capsys):
    caminho = _gravar_afd(tmp_path, marcacao_1510(1))

    assert main(["--interpretar", str(caminho), "B"]) == 0

    saida = capsys.readouterr().out
    assert "Nenhuma linha invalida encontrada." in saida
    assert "NSR: 000000001 - Tipo: Marcação Ponto" in saida


def test_cli_arquivo_inexistente(tmp_path, capsys):
    assert main([str(tmp_path / "nao_existe.txt"), "671"]) == 1
    assert "arquivo nao encontrado" in capsys.readouterr().out


def test_cli_layout_desconhecido(tmp_path, capsys):
    caminho = _gravar_afd(tmp_path, marcacao_1510(1))
    assert main([str(caminho), "999"]) == 1
    assert "Layout AFD desconhecido" in capsys.readouterr().out


def test_cli_arquivo_iso_8859_1(tmp_path, capsys):
    caminho = tmp_path / "afd.txt"
    texto = arquivo(empresa_1510(1, razao="AÇÚCAR UNIÃO LTDA"), marcacao_1510(2))
    caminho.write_bytes(texto.encode("iso-8859-1"))

    assert main([str(caminho), "1510"]) == 0

    saida = capsys.readouterr().out
    assert "Razao social: AÇÚCAR UNIÃO LTDA" in saida
    assert "Nenhuma linha invalida encontrada." in saida
