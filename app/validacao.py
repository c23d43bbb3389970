"""Validação explícita dos dados de Categoria e Produto.

Cada função recebe o dicionário no formato do JSON (``nome``, ``nomeProduto``,
``preco``...) e devolve a lista de erros por campo. Lista vazia significa
dados válidos. Os serviços chamam ``exigir_valido`` antes de qualquer escrita
no banco.
"""
import math
from decimal import Decimal, InvalidOperation

from app.errors import ValidationError

NOME_CATEGORIA_MAX = 100
SKU_MAX = 100
NOME_PRODUTO_MAX = 150

# Faixa de um INTEGER de 64 bits com sinal
ID_MIN = -2 ** 63
ID_MAX = 2 ** 63 - 1

MSG_DESCRICAO_OBRIGATORIA = "O atributo descrição é obrigatorio"


def _erro(campo, mensagem):
    return {"campo": campo, "mensagem": mensagem}


def _validar_texto_obrigatorio(erros, data, campo, maximo, msg_obrigatorio, msg_tamanho):
    valor = data.get(campo)
    if valor is None:
        erros.append(_erro(campo, msg_obrigatorio))
        return
    if not isinstance(valor, str):
        erros.append(_erro(campo, f"O atributo {campo} deve ser um texto!"))
        return
    if not valor.strip():
        erros.append(_erro(campo, msg_obrigatorio))
    if not 1 <= len(valor) <= maximo:
        erros.append(_erro(campo, msg_tamanho))


def _validar_descricao(erros, data):
    valor = data.get("descricao")
    if valor is None:
        erros.append(_erro("descricao", MSG_DESCRICAO_OBRIGATORIA))
    elif not isinstance(valor, str):
        erros.append(_erro("descricao", "O atributo descricao deve ser um texto!"))


def converter_preco(valor):
    """Converte ``preco`` para float; levanta ValueError se não for numérico."""
    if isinstance(valor, bool):
        raise ValueError("booleano não é preço")
    if isinstance(valor, (int, float, Decimal)):
        numero = Decimal(str(valor))
    elif isinstance(valor, str):
        try:
            numero = Decimal(valor.strip())
        except InvalidOperation:
            raise ValueError(f"preço inválido: {valor!r}")
    else:
        raise ValueError(f"preço inválido: {valor!r}")
    convertido = float(numero)
    if not math.isfinite(convertido):
        raise ValueError(f"preço inválido: {valor!r}")
    return convertido


def _validar_preco(erros, data):
    valor = data.get("preco")
    if valor is None:
        erros.append(_erro("preco", "O Atributo Preço deve ser preenchido!"))
        return
    try:
        converter_preco(valor)
    except ValueError:
        erros.append(_erro("preco", "O Atributo Preço deve ser um número!"))


def id_valido(id):
    """Ids fora da faixa do banco não podem existir."""
    return ID_MIN <= id <= ID_MAX


def id_da_categoria(valor):
    """Extrai o id de ``{"id": 3}``; None quando o produto não tem categoria."""
    if valor is None:
        return None
    if isinstance(valor, dict):
        id = valor.get("id")
        if isinstance(id, int) and not isinstance(id, bool):
            return id
    raise ValueError(f"referência de categoria inválida: {valor!r}")


def _validar_categoria_referenciada(erros, data):
    try:
        id_da_categoria(data.get("categoria"))
    except ValueError:
        erros.append(_erro("categoria", "O atributo categoria deve conter um id válido!"))


def validar_categoria(data):
    erros = []
    _validar_texto_obrigatorio(
        erros, data, "nome", NOME_CATEGORIA_MAX,
        "O atributo nome é obrigatorio!",
        "O atributo Nome deve conter no mínimo 1 e no maximo 100 caracteres!",
    )
    _validar_descricao(erros, data)
    return erros


def validar_produto(data):
    erros = []
    _validar_texto_obrigatorio(
        erros, data, "sku", SKU_MAX,
        "O Atributo SKU é obrigatorio!",
        "O Atributo SKU deve conter no mínimo 1 e no maximo 100 caracteres!",
    )
    _validar_texto_obrigatorio(
        erros, data, "nomeProduto", NOME_PRODUTO_MAX,
        "O Atributo nomeProduto é obrigatorio!",
        "O Atributo nomeProduto deve conter no mínimo 1 e no maximo 150 caracteres!",
    )
    _validar_descricao(erros, data)
    _validar_preco(erros, data)
    _validar_categoria_referenciada(erros, data)
    return erros


def exigir_valido(erros):
    if erros:
        raise ValidationError(erros)
