"""Validação do NSR (número sequencial de registro)."""

from .layouts import TIPO_CABECALHO


def validar_sequencia(contexto, nsr, tipo):
    """
    Confere o NSR da linha contra o último NSR aceito no contexto e atualiza o
    estado quando a linha passa. Retorna a mensagem de erro ou ``None``.

    Portaria 671: todo registro deve ter exatamente o NSR anterior + 1. Um
    primeiro NSR não numérico é aceito e conta como 0.
    Portaria 1510: o cabeçalho é isento (pode ressincronizar a contagem); os
    demais só são rejeitados quando o NSR volta para trás. Lacunas são aceitas
    e NSR não numérico não é comparado nem altera o estado.
    """
    numerico = isinstance(nsr, int)

    if contexto.layout.sequencia_estrita:
        if contexto.ultimo_nsr is not None and (
            not numerico or nsr != contexto.ultimo_nsr + 1
        ):
            return (
                f"NSR {nsr!r} fora de sequência (esperado {contexto.ultimo_nsr + 1:09d})"
            )
        # NSR inicial não numérico vale 0: o próximo registro precisa ser o 1
        contexto.ultimo_nsr = nsr if numerico else 0
        return None

    if not numerico:
        return None
    if (
        tipo != TIPO_CABECALHO
        and contexto.ultimo_nsr is not None
        and nsr < contexto.ultimo_nsr
    ):
        return f"NSR {nsr:09d} menor que o último aceito ({contexto.ultimo_nsr:09d})"
    contexto.ultimo_nsr = nsr
    return None
