from .categoria import Categoria
from .produto import Produto

__all__ = [
    "Categoria",
    "Produto",
]
