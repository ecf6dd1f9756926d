from models.enums import BoardKind
from models.scrabble_board import ScrabbleBoard
from models.word_play_board import WordPlayBoard

BOARD_MODELS = {
    BoardKind.SCRABBLE: ScrabbleBoard,
    BoardKind.WORD_PLAY: WordPlayBoard,
}

# ids are stored in a signed 64-bit integer column
BOARD_ID_MIN = -2**63
BOARD_ID_MAX = 2**63 - 1


class BoardServiceError(Exception):
    """Base class for board service errors."""


class UnknownBoardKindError(BoardServiceError, ValueError):
    """Raised when a board kind does not name a stored record type."""


class InvalidBoardIdError(BoardServiceError, ValueError):
    """Raised when a board id cannot be stored."""


class DuplicateBoardError(BoardServiceError):
    """Raised when a board id is already taken."""


class BoardIdsExhaustedError(BoardServiceError):
    """Raised when no id is left above the highest stored one."""


def resolve_board_kind(kind) -> BoardKind:
    try:
        return BoardKind(kind)
    except ValueError:
        raise UnknownBoardKindError(f"Unknown board kind: {kind}") from None


def get_board_model(kind):
    return BOARD_MODELS[resolve_board_kind(kind)]


def is_valid_board_id(board_id) -> bool:
    if isinstance(board_id, bool) or not isinstance(board_id, int):
        return False
    return BOARD_ID_MIN <= board_id <= BOARD_ID_MAX
