"""Operações de persistência de Categoria."""
from app.errors import NotFoundError
from app.extensions import db
from app.logger import logger
from app.models.categoria import Categoria
from app.validacao import exigir_valido, id_valido, validar_categoria


def listar_categorias():
    return Categoria.query.order_by(Categoria.id).all()


def obter_categoria(categoria_id):
    categoria = db.session.get(Categoria, categoria_id) if id_valido(categoria_id) else None
    if categoria is None:
        raise NotFoundError("Categoria", categoria_id)
    return categoria


def buscar_categorias_por_nome(nome):
    return (
        Categoria.query.filter(Categoria.nome.ilike(f"%{nome}%"))
        .order_by(Categoria.id)
        .all()
    )


def _validar(data, funcao):
    erros = validar_categoria(data)
    if erros:
        logger.warning(f"[{funcao}] Dados inválidos: {[e['campo'] for e in erros]}")
    exigir_valido(erros)


def criar_categoria(data):
    _validar(data, "criar_categoria")
    categoria = Categoria()
    categoria.atualizar_de_dict(data)
    db.session.add(categoria)
    db.session.commit()
    logger.info(f"[criar_categoria] Categoria criada com ID: {categoria.id}")
    return categoria


def atualizar_categoria(categoria_id, data):
    categoria = obter_categoria(categoria_id)
    _validar(data, "atualizar_categoria")
    categoria.atualizar_de_dict(data)
    db.session.commit()
    logger.info(f"[atualizar_categoria] Categoria {categoria_id} atualizada")
    return categoria


def remover_categoria(categoria_id):
    """Remove a categoria e todos os produtos que apontam para ela.

    Os produtos são apagados pela sessão para que a cascata não dependa do
    banco aplicar ``ON DELETE CASCADE``. Devolve quantos produtos saíram.
    """
    categoria = obter_categoria(categoria_id)
    produtos = categoria.listar_produtos()
    for produto in produtos:
        db.session.delete(produto)
    db.session.delete(categoria)
    db.session.commit()
    logger.info(
        f"[remover_categoria] Categoria {categoria_id} removida junto com "
        f"{len(produtos)} produto(s)"
    )
    return len(produtos)
