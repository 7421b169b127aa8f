import logging
import os

from flask import Flask, jsonify, request

from validador_afd import (
    LAYOUTS,
    ErroLeituraAFD,
    decodificar_arquivo,
    processar_afd_671,
    processar_afd_1510,
)

logger = logging.getLogger(__name__)


def _erro(mensagem, status):
    return jsonify({"erro": mensagem}), status


def _processar_upload(processador):
    """
    Lê o arquivo do campo ``file``, executa o processador informado
    e devolve o resultado em JSON.
    """
    arquivo = request.files.get("file")
    if not arquivo:
        return _erro("Nenhum arquivo enviado.", 400)

    texto = decodificar_arquivo(arquivo.read())
    try:
        resultado = processador(texto)
    except ErroLeituraAFD as exc:
        logger.warning("Falha ao ler o arquivo %s: %s", arquivo.filename, exc)
        return _erro(str(exc), 422)

    return jsonify(resultado)


app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = int(os.environ.get("AFD_MAX_UPLOAD_MB", "10")) * 1024 * 1024
# Mantém a ordem dos tipos de registro na resposta
app.json.sort_keys = False


@app.errorhandler(405)
def metodo_nao_permitido(_erro_http):
    return _erro("Método não permitido. Use POST.", 405)


@app.errorhandler(413)
def arquivo_muito_grande(_erro_http):
    logger.warning("Upload recusado: arquivo acima de %s bytes.", app.config["MAX_CONTENT_LENGTH"])
    return _erro("Arquivo maior que o tamanho máximo permitido.", 413)


@app.route("/")
def index():
    """
    Página inicial: lista os endpoints de validação por portaria.
    """
    return jsonify(
        {
            "layouts": {codigo: layout.nome for codigo, layout in LAYOUTS.items()},
            "endpoints": {
                "671": "/processar_afd",
                "1510": "/processar_afd_1510",
            },
        }
    )


@app.route("/processar_afd", methods=["POST"])
def processar_afd_671_view():
    """Valida um AFD da Portaria 671."""
    return _processar_upload(processar_afd_671)


@app.route("/processar_afd_1510", methods=["POST"])
def processar_afd_1510_view():
    """Valida um AFD da Portaria 1510."""
    return _processar_upload(processar_afd_1510)


if __name__ == "__main__":
    # debug=True é útil durante o desenvolvimento
    app.run(debug=True)
