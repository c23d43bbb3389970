"""Operações de persistência de Produto."""
from app.errors import DanglingReferenceError, NotFoundError
from app.extensions import db
from app.logger import logger
from app.models.categoria import Categoria
from app.models.produto import Produto
from app.services.categoria_service import obter_categoria
from app.validacao import exigir_valido, id_da_categoria, id_valido, validar_produto


def listar_produtos():
    return Produto.query.order_by(Produto.id).all()


def obter_produto(produto_id):
    produto = db.session.get(Produto, produto_id) if id_valido(produto_id) else None
    if produto is None:
        raise NotFoundError("Produto", produto_id)
    return produto


def buscar_produtos_por_nome(nome):
    return (
        Produto.query.filter(Produto.nome_produto.ilike(f"%{nome}%"))
        .order_by(Produto.id)
        .all()
    )


def listar_produtos_da_categoria(categoria_id):
    return obter_categoria(categoria_id).listar_produtos()


def _validar(data, funcao):
    erros = validar_produto(data)
    if erros:
        logger.warning(f"[{funcao}] Dados inválidos: {[e['campo'] for e in erros]}")
    exigir_valido(erros)

    categoria_id = id_da_categoria(data.get("categoria"))
    if categoria_id is not None and (
        not id_valido(categoria_id) or db.session.get(Categoria, categoria_id) is None
    ):
        logger.warning(f"[{funcao}] Categoria {categoria_id} inexistente")
        raise DanglingReferenceError("Categoria", categoria_id)


def criar_produto(data):
    _validar(data, "criar_produto")
    produto = Produto()
    produto.atualizar_de_dict(data)
    db.session.add(produto)
    db.session.commit()
    logger.info(
        f"[criar_produto] Produto criado com ID: {produto.id} "
        f"(categoria {produto.categoria_id})"
    )
    return produto


def atualizar_produto(produto_id, data):
    produto = obter_produto(produto_id)
    _validar(data, "atualizar_produto")
    produto.atualizar_de_dict(data)
    db.session.commit()
    logger.info(f"[atualizar_produto] Produto {produto_id} atualizado")
    return produto


def remover_produto(produto_id):
    produto = obter_produto(produto_id)
    db.session.delete(produto)
    db.session.commit()
    logger.info(f"[remover_produto] Produto {produto_id} removido")
