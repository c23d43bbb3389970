from app.models.categoria import Categoria
from app.models.produto import Produto


# Verifica que a categoria recebe id ao ser salva
def test_criacao_de_categoria(app, db_session):
    categoria = Categoria(nome="Vitaminas", descricao="Suplementos")
    db_session.add(categoria)
    db_session.commit()

    encontrada = Categoria.query.filter_by(nome="Vitaminas").first()
    assert encontrada is not None
    assert encontrada.id == categoria.id
    assert encontrada.descricao == "Suplementos"


# A lista de produtos vem da consulta por categoria_id, em ordem de id
def test_listar_produtos_da_categoria(app, db_session):
    categoria = Categoria(nome="Antibióticos", descricao="")
    outra = Categoria(nome="Vitaminas", descricao="")
    db_session.add_all([categoria, outra])
    db_session.commit()

    db_session.add_all([
        Produto(sku="AB2", nome_produto="Azitromicina", descricao="", preco=30.0, categoria_id=categoria.id),
        Produto(sku="VT1", nome_produto="Vitamina C", descricao="", preco=9.9, categoria_id=outra.id),
        Produto(sku="AB1", nome_produto="Amoxicilina", descricao="", preco=25.0, categoria_id=categoria.id),
    ])
    db_session.commit()

    skus = [p.sku for p in categoria.listar_produtos()]
    assert skus == ["AB2", "AB1"]


def test_categoria_nao_salva_nao_tem_produtos(app):
    assert Categoria(nome="Nova", descricao="").listar_produtos() == []


# Os produtos da categoria saem sem a referência de volta
def test_categoria_a_dicionario_sem_ciclo(app, db_session):
    categoria = Categoria(nome="Analgésicos", descricao="Dor e febre")
    db_session.add(categoria)
    db_session.commit()
    db_session.add(Produto(sku="AN001", nome_produto="Paracetamol", descricao="500mg",
                           preco=12.5, categoria_id=categoria.id))
    db_session.commit()

    dados = categoria.to_dict()
    assert dados["nome"] == "Analgésicos"
    assert len(dados["produto"]) == 1
    assert dados["produto"][0]["sku"] == "AN001"
    assert "categoria" not in dados["produto"][0]

    assert "produto" not in categoria.to_dict(incluir_produtos=False)


def test_categoria_ida_e_volta(app, db_session):
    categoria = Categoria(nome="Dermocosméticos", descricao="Pele")
    db_session.add(categoria)
    db_session.commit()

    dados = categoria.to_dict()
    copia = Categoria.from_dict(dados)
    assert copia.id == categoria.id
    assert copia.to_dict(incluir_produtos=False) == categoria.to_dict(incluir_produtos=False)


# O banco remove os produtos quando a categoria é apagada (ON DELETE CASCADE)
def test_exclusao_em_cascata_no_banco(app, db_session):
    categoria = Categoria(nome="Antigripais", descricao="")
    db_session.add(categoria)
    db_session.commit()
    db_session.add(Produto(sku="AG1", nome_produto="Benegrip", descricao="", preco=15.0,
                           categoria_id=categoria.id))
    db_session.commit()

    db_session.delete(categoria)
    db_session.commit()
    assert Produto.query.count() == 0
