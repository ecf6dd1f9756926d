from flask import Blueprint, request, jsonify
from database import session_scope
from services.board_service import BoardService
from services.utils import (
    BoardIdsExhaustedError,
    DuplicateBoardError,
    UnknownBoardKindError,
    is_valid_board_id,
)

router = Blueprint('board_controller', __name__)


def _read_board(data):
    if not isinstance(data, dict) or "board" not in data:
        return None, (jsonify({"error": "Missing parameters"}), 400)
    board = data["board"]
    if board is not None and not isinstance(board, str):
        return None, (jsonify({"error": "board must be a string or null"}), 400)
    return board, None


def _not_found(board_id):
    return jsonify({"error": f"Board {board_id} not found"}), 404


@router.errorhandler(UnknownBoardKindError)
def unknown_kind(e):
    return jsonify({"error": str(e)}), 404


@router.route("/<kind>/boards", methods=["GET"])
def list_boards(kind):
    with session_scope() as db:
        service = BoardService(db, kind)
        boards = service.list_boards()
        return jsonify({"boards": [b.to_dict() for b in boards]})


@router.route("/<kind>/boards", methods=["POST"])
def create_board(kind):
    with session_scope() as db:
        service = BoardService(db, kind)
        data = request.get_json(silent=True)
        board, error = _read_board(data)
        if error:
            return error

        board_id = data.get("id")
        if board_id is not None and not is_valid_board_id(board_id):
            return jsonify({"error": "id must be a signed 64-bit integer"}), 400

        try:
            record = service.create_board(board, board_id)
        except (DuplicateBoardError, BoardIdsExhaustedError) as e:
            return jsonify({"error": str(e)}), 409
        return jsonify(record.to_dict()), 201


@router.route("/<kind>/boards/<int(signed=True):board_id>", methods=["GET"])
def get_board(kind, board_id):
    with session_scope() as db:
        service = BoardService(db, kind)
        record = service.get_board(board_id)
        if record is None:
            return _not_found(board_id)
        return jsonify(record.to_dict())


@router.route("/<kind>/boards/<int(signed=True):board_id>", methods=["PUT"])
def update_board(kind, board_id):
    with session_scope() as db:
        service = BoardService(db, kind)
        board, error = _read_board(request.get_json(silent=True))
        if error:
            return error

        record = service.update_board(board_id, board)
        if record is None:
            return _not_found(board_id)
        return jsonify(record.to_dict())


@router.route("/<kind>/boards/<int(signed=True):board_id>", methods=["DELETE"])
def delete_board(kind, board_id):
    with session_scope() as db:
        service = BoardService(db, kind)
        if not service.delete_board(board_id):
            return _not_found(board_id)
        return jsonify({"deleted": True})
