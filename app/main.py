import os
from flask import Flask, jsonify
from dotenv import load_dotenv

from app.extensions import db
from app.errors import registrar_manipuladores
from app.logger import logger

load_dotenv()


def create_app(testing=False):
    app = Flask(__name__)

    if testing:
        app.config.update(
            SQLALCHEMY_DATABASE_URI="sqlite:///:memory:",
            SQLALCHEMY_TRACK_MODIFICATIONS=False,
            TESTING=True,
            SECRET_KEY="chave_teste"
        )
    else:
        app.config.update(
            SQLALCHEMY_DATABASE_URI=os.getenv('DATABASE_URL', 'sqlite:///farmacia.db'),
            SQLALCHEMY_TRACK_MODIFICATIONS=False,
            SECRET_KEY=os.getenv('FLASK_SECRET_KEY', 'chave_de_desenvolvimento')
        )
    # O JSON deve manter a ordem dos campos e os acentos
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    # Inicializar extensões
    db.init_app(app)
    registrar_manipuladores(app)

    # Registrar blueprints
    from app.routes.categoria import bp_categoria
    from app.routes.produto import bp_produto

    app.register_blueprint(bp_categoria)
    app.register_blueprint(bp_produto)

    @app.errorhandler(404)
    def rota_nao_encontrada(e):
        return jsonify({"msg": "Recurso não encontrado"}), 404

    @app.cli.command("create-db")
    def create_db():
        with app.app_context():
            db.create_all()
            logger.info("Banco de dados criado corretamente.")

    logger.debug(f"Aplicação criada (testing={testing})")
    return app


# Executar
app = create_app()

if __name__ == '__main__':
    app.run(debug=True)
