from flask import abort, jsonify, make_response, request


def corpo_json():
    """Devolve o corpo da requisição como dict ou responde 400."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(make_response(jsonify({"msg": "Corpo da requisição deve ser um objeto JSON"}), 400))
    return data
