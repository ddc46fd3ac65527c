from flask import jsonify

def success(status=200, **fields):
    return jsonify({"success": True, **fields}), status
