from flask import Blueprint, jsonify

from app.routes import corpo_json
from app.services import categoria_service

bp_categoria = Blueprint("bp_categoria", __name__, url_prefix="/categorias")


# Listar todas as categorias
@bp_categoria.route("", methods=["GET"])
def listar_categorias():
    categorias = categoria_service.listar_categorias()
    return jsonify([c.to_dict() for c in categorias])


# Buscar categoria por id
@bp_categoria.route("/<int:id>", methods=["GET"])
def obter_categoria(id):
    return jsonify(categoria_service.obter_categoria(id).to_dict())


# Buscar categorias cujo nome contém o texto informado
@bp_categoria.route("/nome/<nome>", methods=["GET"])
def buscar_por_nome(nome):
    categorias = categoria_service.buscar_categorias_por_nome(nome)
    return jsonify([c.to_dict() for c in categorias])


# Criar nova categoria
@bp_categoria.route("", methods=["POST"])
def criar_categoria():
    categoria = categoria_service.criar_categoria(corpo_json())
    return jsonify(categoria.to_dict()), 201


# Atualizar categoria (todos os campos)
@bp_categoria.route("/<int:id>", methods=["PUT"])
def atualizar_categoria(id):
    categoria = categoria_service.atualizar_categoria(id, corpo_json())
    return jsonify(categoria.to_dict())


# Remover categoria e seus produtos
@bp_categoria.route("/<int:id>", methods=["DELETE"])
def remover_categoria(id):
    categoria_service.remover_categoria(id)
    return "", 204
