"""Estado de uma execução de validação e montagem do resultado final."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .layouts import LayoutAFD

logger = logging.getLogger(__name__)


@dataclass
class ContextoValidacao:
    """
    Acumulador de uma única execução: último NSR aceito, registros por tipo e
    linhas inválidas. Cada arquivo validado tem o seu; nada é compartilhado.
    """

    layout: LayoutAFD
    total_linhas: int = 0
    ultimo_nsr: Optional[int] = None
    registros: Dict[str, List[str]] = field(default_factory=dict)
    linhas_invalidas: List[str] = field(default_factory=list)
    metadados: Dict[str, Optional[str]] = field(default_factory=dict)
    ultima_alteracao_empresa: Optional[Dict[str, str]] = None

    def __post_init__(self):
        if not self.registros:
            self.registros = {tipo: [] for tipo in self.layout.tipos}

    def aceitar(self, tipo, linha):
        self.registros[tipo].append(linha)

    def rejeitar(self, linha, motivo):
        logger.debug("Linha inválida (%s): %.40s", motivo, linha)
        self.linhas_invalidas.append(linha)

    def remover_registro(self, tipo, linha, motivo):
        """Retira um registro já aceito do seu grupo e o move para as linhas inválidas."""
        self.registros[tipo].remove(linha)
        logger.warning("Registro tipo %s descartado: %s", tipo, motivo)
        self.linhas_invalidas.append(linha)

    @property
    def total_registros_validos(self):
        return sum(len(linhas) for linhas in self.registros.values())


def montar_resultado(contexto):
    """
    Monta o resultado estruturado a partir do estado acumulado.
    Não revalida nada: apenas organiza o que o contexto já contém.
    """
    metadados = contexto.metadados
    return {
        "registros": {tipo: list(linhas) for tipo, linhas in contexto.registros.items()},
        "linhasInvalidas": list(contexto.linhas_invalidas),
        "totalLinhas": contexto.total_linhas,
        "dataInicio": metadados.get("dataInicio"),
        "dataFim": metadados.get("dataFim"),
        "dataHoraGeracao": metadados.get("dataHoraGeracao"),
        "serialEquipamento": metadados.get("serialEquipamento"),
        "cnpjCpfEmpregador": metadados.get("cnpjCpfEmpregador"),
        "ultimaAlteracaoEmpresa": (
            dict(contexto.ultima_alteracao_empresa)
            if contexto.ultima_alteracao_empresa
            else None
        ),
    }
