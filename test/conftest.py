import pytest
from app import main
from app.extensions import db


# Aplicação com SQLite em memória, recriada para cada teste
@pytest.fixture
def app():
    app = main.create_app(testing=True)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    yield db.session


# Dados de exemplo usados em vários testes
@pytest.fixture
def dados_categoria():
    return {"nome": "Analgésicos", "descricao": "Dor e febre"}


@pytest.fixture
def dados_produto():
    return {
        "sku": "AN001",
        "nomeProduto": "Paracetamol",
        "descricao": "500mg",
        "preco": 12.50,
    }
