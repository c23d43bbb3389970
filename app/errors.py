# Exceções da camada de serviço e seus manipuladores HTTP
from flask import jsonify


class ValidationError(Exception):
    """Um ou mais campos violam as restrições da entidade.

    ``erros`` é uma lista de dicionários ``{"campo": ..., "mensagem": ...}``.
    """

    def __init__(self, erros):
        self.erros = list(erros)
        super().__init__("; ".join(f"{e['campo']}: {e['mensagem']}" for e in self.erros))

    @property
    def campos(self):
        return [e["campo"] for e in self.erros]


class DanglingReferenceError(Exception):
    """Referência para um registro que não existe no banco."""

    def __init__(self, entidade, id):
        self.entidade = entidade
        self.id = id
        super().__init__(f"{entidade} com id {id} não existe!")


class NotFoundError(Exception):
    def __init__(self, entidade, id):
        self.entidade = entidade
        self.id = id
        super().__init__(f"{entidade} com id {id} não existe")


def registrar_manipuladores(app):
    @app.errorhandler(ValidationError)
    def erro_validacao(e):
        return jsonify({"msg": "Dados inválidos", "erros": e.erros}), 400

    @app.errorhandler(DanglingReferenceError)
    def erro_referencia(e):
        return jsonify({"msg": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def erro_nao_encontrado(e):
        return jsonify({"msg": str(e)}), 404
