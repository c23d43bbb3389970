# Definição do modelo Categoria
from app.extensions import db


class Categoria(db.Model):
    __tablename__ = "categorias"

    # Colunas da tabela
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    nome = db.Column(db.String(100), nullable=False)
    descricao = db.Column(db.Text, nullable=False)

    # Os produtos não ficam mapeados aqui: o lado dono da relação é
    # Produto.categoria_id e a lista é obtida por consulta
    def listar_produtos(self):
        from app.models.produto import Produto

        if self.id is None:
            return []
        return (
            Produto.query.filter_by(categoria_id=self.id)
            .order_by(Produto.id)
            .all()
        )

    def atualizar_de_dict(self, data):
        self.nome = data["nome"]
        self.descricao = data["descricao"]

    @classmethod
    def from_dict(cls, data):
        # A lista "produto" é derivada e não é lida de volta
        categoria = cls(id=data.get("id"))
        categoria.atualizar_de_dict(data)
        return categoria

    # Representação em formato dicionário; os produtos saem sem "categoria"
    def to_dict(self, incluir_produtos=True):
        dados = {
            "id": self.id,
            "nome": self.nome,
            "descricao": self.descricao,
        }
        if incluir_produtos:
            dados["produto"] = [
                p.to_dict(incluir_categoria=False) for p in self.listar_produtos()
            ]
        return dados

    def __repr__(self):
        return f"<Categoria(id={self.id}, nome={self.nome!r})>"
