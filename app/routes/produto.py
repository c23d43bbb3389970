from flask import Blueprint, jsonify

from app.routes import corpo_json
from app.services import produto_service

bp_produto = Blueprint("bp_produto", __name__, url_prefix="/produtos")


@bp_produto.route("", methods=["GET"])
def listar_produtos():
    produtos = produto_service.listar_produtos()
    return jsonify([p.to_dict() for p in produtos])


@bp_produto.route("/<int:id>", methods=["GET"])
def obter_produto(id):
    return jsonify(produto_service.obter_produto(id).to_dict())


# Busca por parte do nomeProduto, sem diferenciar maiúsculas
@bp_produto.route("/nome/<nome>", methods=["GET"])
def buscar_por_nome(nome):
    produtos = produto_service.buscar_produtos_por_nome(nome)
    return jsonify([p.to_dict() for p in produtos])


@bp_produto.route("/categoria/<int:categoria_id>", methods=["GET"])
def listar_por_categoria(categoria_id):
    produtos = produto_service.listar_produtos_da_categoria(categoria_id)
    return jsonify([p.to_dict() for p in produtos])


@bp_produto.route("", methods=["POST"])
def criar_produto():
    produto = produto_service.criar_produto(corpo_json())
    return jsonify(produto.to_dict()), 201


@bp_produto.route("/<int:id>", methods=["PUT"])
def atualizar_produto(id):
    produto = produto_service.atualizar_produto(id, corpo_json())
    return jsonify(produto.to_dict())


@bp_produto.route("/<int:id>", methods=["DELETE"])
def remover_produto(id):
    produto_service.remover_produto(id)
    return "", 204
