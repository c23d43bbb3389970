# Modelo Produto com relação muitos-para-um com Categoria
from app.extensions import db
from app.models.categoria import Categoria
from app.validacao import converter_preco, id_da_categoria


class Produto(db.Model):
    __tablename__ = "produtos"

    # Atributos principais
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    sku = db.Column(db.String(100), nullable=False)
    nome_produto = db.Column(db.String(150), nullable=False)
    descricao = db.Column(db.Text, nullable=False)
    preco = db.Column(db.Float, nullable=False)

    # Relação (somente deste lado)
    categoria_id = db.Column(
        db.Integer,
        db.ForeignKey("categorias.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    categoria = db.relationship("Categoria")

    def atualizar_de_dict(self, data):
        """Aplica uma atualização completa vinda do JSON já validado.

        A categoria é gravada apenas pelo id; a existência dela é conferida
        pelo serviço antes do commit.
        """
        self.sku = data["sku"]
        self.nome_produto = data["nomeProduto"]
        self.descricao = data["descricao"]
        self.preco = converter_preco(data["preco"])
        self.categoria_id = id_da_categoria(data.get("categoria"))

    @classmethod
    def from_dict(cls, data):
        """Reconstrói um Produto solto (fora da sessão) a partir do JSON.

        Se a categoria vier completa ela é reconstruída também. Não use o
        resultado com ``db.session.add``: os serviços usam ``atualizar_de_dict``.
        """
        produto = cls(id=data.get("id"))
        produto.atualizar_de_dict(data)
        ref = data.get("categoria")
        if ref is not None and "nome" in ref:
            produto.categoria = Categoria.from_dict(ref)
        return produto

    # Conversão para dicionário; a categoria sai sem a lista "produto"
    def to_dict(self, incluir_categoria=True):
        dados = {
            "id": self.id,
            "sku": self.sku,
            "nomeProduto": self.nome_produto,
            "descricao": self.descricao,
            "preco": self.preco,
        }
        if incluir_categoria:
            if self.categoria is not None:
                dados["categoria"] = self.categoria.to_dict(incluir_produtos=False)
            elif self.categoria_id is not None:
                dados["categoria"] = {"id": self.categoria_id}
            else:
                dados["categoria"] = None
        return dados

    # Representação legível
    def __repr__(self):
        return (
            f"<Produto(id={self.id}, sku={self.sku!r}, nome_produto={self.nome_produto!r}, "
            f"preco={self.preco}, categoria_id={self.categoria_id})>"
        )
