"""Ponto de entrada do validador AFD.

Este arquivo reexporta toda a API pública definida no pacote ``afd``
e mantém o ponto de entrada de linha de comando.
"""

import sys

from afd import *  # noqa: F401,F403
from afd import __all__ as _AFD_ALL
from afd.cli import main

__all__ = list(_AFD_ALL) + ["main"]


if __name__ == "__main__":
    sys.exit(main())
