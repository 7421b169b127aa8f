"""
Tabelas de layout do AFD por portaria.

Cada layout descreve, para cada tipo de registro, o tamanho mínimo da linha e
as posições (índice inicial, índice final exclusivo, base 0) dos campos usados
pelas validações e pela extração de metadados. O código de validação é único;
só estas tabelas mudam entre a Portaria 671 e a Portaria 1510.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from .exceptions import LayoutDesconhecidoError

Campo = Tuple[int, int]

TIPO_CABECALHO = "1"
TIPO_EMPRESA = "2"
TIPO_MARCACAO = "3"
TIPO_AJUSTE_RELOGIO = "4"
TIPO_EMPREGADO = "5"
TIPO_EVENTO_SENSIVEL = "6"
TIPO_TRAILER = "9"

NSR_CABECALHO = "000000000"
NSR_TRAILER = "999999999"

OPERACOES_EMPREGADO = {
    "I": "Inclusão",
    "A": "Alteração",
    "E": "Exclusão",
}


@dataclass(frozen=True)
class TipoRegistro:
    codigo: str
    descricao: str
    tamanho_minimo: int


@dataclass(frozen=True)
class LayoutAFD:
    portaria: str
    nome: str
    tipos: Dict[str, TipoRegistro]

    # Política de NSR: estrita (+1 sempre) ou não decrescente com cabeçalho isento.
    sequencia_estrita: bool

    # Cabeçalho (tipo 1)
    campo_marcador_cabecalho: Campo
    marcadores_cabecalho: FrozenSet[str]
    campo_empregador_cabecalho: Campo
    campo_serial: Campo
    campo_data_inicio: Campo
    campo_data_fim: Campo
    campo_data_hora_geracao: Campo

    # Identificação da empresa (tipo 2)
    campo_data_hora_gravacao: Campo
    campo_empregador_empresa: Campo
    campo_razao_social: Campo
    campo_subcodigo_empresa: Optional[Campo]
    campos_id_empresa: Dict[str, Campo]

    # Marcação de ponto (tipo 3)
    campo_data_hora_marcacao: Campo
    valida_data_hora_marcacao: bool
    campo_pis_marcacao: Campo

    # Ajuste do relógio (tipo 4)
    campo_ajuste_antes: Campo
    campo_ajuste_depois: Campo

    # Inclusão/alteração/exclusão de empregado (tipo 5)
    campo_operacao_empregado: Campo
    campo_pis_empregado: Campo
    campo_nome_empregado: Campo

    # Evento sensível (tipo 6, só 671)
    campo_data_hora_evento: Optional[Campo] = None
    campo_tipo_evento: Optional[Campo] = None

    # Trailer (tipo 9, só 1510): tipo contado -> posição da quantidade
    contagens_trailer: Optional[Dict[str, Campo]] = None

    @property
    def tipo_trailer(self):
        return TIPO_TRAILER if TIPO_TRAILER in self.tipos else None

    def tamanho_minimo(self, tipo):
        return self.tipos[tipo].tamanho_minimo

    def reconhece(self, tipo):
        return tipo in self.tipos


LAYOUT_671 = LayoutAFD(
    portaria="671",
    nome="Portaria 671",
    tipos={
        TIPO_CABECALHO: TipoRegistro(TIPO_CABECALHO, "Cabeçalho", 250),
        TIPO_EMPRESA: TipoRegistro(TIPO_EMPRESA, "Identificação da empresa no REP", 227),
        TIPO_MARCACAO: TipoRegistro(TIPO_MARCACAO, "Marcação de ponto para REP-C e REP-A", 46),
        TIPO_AJUSTE_RELOGIO: TipoRegistro(TIPO_AJUSTE_RELOGIO, "Ajuste do relógio", 58),
        TIPO_EMPREGADO: TipoRegistro(
            TIPO_EMPREGADO, "Inclusão, alteração ou exclusão de empregado no REP", 99
        ),
        TIPO_EVENTO_SENSIVEL: TipoRegistro(TIPO_EVENTO_SENSIVEL, "Eventos sensíveis do REP", 36),
    },
    sequencia_estrita=True,
    campo_marcador_cabecalho=(10, 11),
    marcadores_cabecalho=frozenset({"1"}),
    campo_empregador_cabecalho=(11, 25),
    campo_serial=(189, 206),
    campo_data_inicio=(206, 216),
    campo_data_fim=(216, 226),
    campo_data_hora_geracao=(226, 250),
    campo_data_hora_gravacao=(10, 34),
    campo_empregador_empresa=(49, 63),
    campo_razao_social=(77, 227),
    campo_subcodigo_empresa=None,
    campos_id_empresa={},
    campo_data_hora_marcacao=(10, 34),
    valida_data_hora_marcacao=False,
    campo_pis_marcacao=(34, 46),
    campo_ajuste_antes=(10, 34),
    campo_ajuste_depois=(34, 58),
    campo_operacao_empregado=(34, 35),
    campo_pis_empregado=(35, 47),
    campo_nome_empregado=(47, 99),
    campo_data_hora_evento=(10, 34),
    campo_tipo_evento=(34, 36),
)

LAYOUT_1510 = LayoutAFD(
    portaria="1510",
    nome="Portaria 1510",
    tipos={
        TIPO_CABECALHO: TipoRegistro(TIPO_CABECALHO, "Cabeçalho", 232),
        TIPO_EMPRESA: TipoRegistro(TIPO_EMPRESA, "Identificação da empresa no REP", 299),
        TIPO_MARCACAO: TipoRegistro(TIPO_MARCACAO, "Marcação de ponto", 34),
        TIPO_AJUSTE_RELOGIO: TipoRegistro(TIPO_AJUSTE_RELOGIO, "Ajuste do relógio", 34),
        TIPO_EMPREGADO: TipoRegistro(
            TIPO_EMPREGADO, "Inclusão, alteração ou exclusão de empregado no REP", 87
        ),
        TIPO_TRAILER: TipoRegistro(TIPO_TRAILER, "Trailer", 46),
    },
    sequencia_estrita=False,
    campo_marcador_cabecalho=(10, 11),
    marcadores_cabecalho=frozenset({"1"}),
    campo_empregador_cabecalho=(11, 25),
    campo_serial=(187, 204),
    campo_data_inicio=(204, 212),
    campo_data_fim=(212, 220),
    campo_data_hora_geracao=(220, 232),
    campo_data_hora_gravacao=(10, 22),
    campo_empregador_empresa=(23, 37),
    campo_razao_social=(49, 199),
    # Subcódigo na posição 023: 1 = CNPJ, 2 = CPF; ambos gravados em 024-037
    campo_subcodigo_empresa=(22, 23),
    campos_id_empresa={"1": (23, 37), "2": (23, 37)},
    campo_data_hora_marcacao=(10, 22),
    valida_data_hora_marcacao=True,
    campo_pis_marcacao=(22, 34),
    campo_ajuste_antes=(10, 22),
    campo_ajuste_depois=(22, 34),
    campo_operacao_empregado=(22, 23),
    campo_pis_empregado=(23, 35),
    campo_nome_empregado=(35, 87),
    contagens_trailer={
        TIPO_EMPRESA: (10, 19),
        TIPO_MARCACAO: (19, 28),
        TIPO_AJUSTE_RELOGIO: (28, 37),
        TIPO_EMPREGADO: (37, 46),
    },
)

LAYOUTS = {
    "671": LAYOUT_671,
    "1510": LAYOUT_1510,
}

_ALIASES_LAYOUT = {
    "a": "671",
    "671": "671",
    "portaria 671": "671",
    "b": "1510",
    "1510": "1510",
    "portaria 1510": "1510",
}


def obter_layout(seletor):
    """
    Resolve o seletor informado ("671", "1510", "A", "B" ou o próprio layout)
    para o descritor de layout correspondente.
    """
    if isinstance(seletor, LayoutAFD):
        return seletor
    chave = _ALIASES_LAYOUT.get(str(seletor).strip().lower())
    if chave is None:
        raise LayoutDesconhecidoError(seletor)
    return LAYOUTS[chave]
