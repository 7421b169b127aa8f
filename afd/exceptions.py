"""Exceções do validador AFD."""


class ErroAFD(Exception):
    """Erro base do validador AFD."""


class ErroLeituraAFD(ErroAFD):
    """
    Falha fatal ao ler o arquivo de origem (fonte ilegível ou conteúdo
    que não é texto UTF-8). Nunca é convertida em linha inválida.
    """


class LayoutDesconhecidoError(ErroAFD, ValueError):
    """Seletor de layout que não corresponde a nenhuma portaria suportada."""

    def __init__(self, seletor):
        self.seletor = seletor
        super().__init__(f"Layout AFD desconhecido: {seletor!r}")
