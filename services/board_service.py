import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .utils import (
    BOARD_ID_MAX,
    BoardIdsExhaustedError,
    DuplicateBoardError,
    InvalidBoardIdError,
    get_board_model,
    is_valid_board_id,
    resolve_board_kind,
)

logger = logging.getLogger(__name__)


class BoardService:
    """Stores and loads one kind of board record.

    Board strings go in and come out untouched; nothing here looks inside them.
    """

    def __init__(self, db: Session, kind):
        self.db = db
        self.kind = resolve_board_kind(kind)
        self.model = get_board_model(self.kind)

    def next_board_id(self) -> int:
        # One above the highest stored id, never below 1
        highest = self.db.query(func.max(self.model.id)).scalar()
        next_id = max(highest or 0, 0) + 1
        if next_id > BOARD_ID_MAX:
            raise BoardIdsExhaustedError(f"No {self.kind.value} board id left above {highest}")
        return next_id

    def create_board(self, board, board_id: Optional[int] = None):
        if board_id is None:
            board_id = self.next_board_id()
        elif not is_valid_board_id(board_id):
            raise InvalidBoardIdError(f"Invalid board id: {board_id}")
        elif self.get_board(board_id):
            logger.warning("[create_board] %s id %s already exists", self.kind.value, board_id)
            raise DuplicateBoardError(f"{self.kind.value} board {board_id} already exists")

        record = self.model(board_id, board)
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError:
            # Another writer took the id between the check and the insert
            self.db.rollback()
            logger.warning("[create_board] %s id %s already exists", self.kind.value, board_id)
            raise DuplicateBoardError(f"{self.kind.value} board {board_id} already exists") from None

        self.db.refresh(record)
        logger.info("[create_board] Stored %s board %s", self.kind.value, record.id)
        return record

    def get_board(self, board_id: int):
        if not is_valid_board_id(board_id):
            return None
        return self.db.get(self.model, board_id)

    def list_boards(self):
        return self.db.query(self.model).order_by(self.model.id).all()

    def count_boards(self) -> int:
        return self.db.query(self.model).count()

    def update_board(self, board_id: int, board):
        record = self.get_board(board_id)
        if not record:
            logger.info("[update_board] %s board %s not found", self.kind.value, board_id)
            return None

        record.board = board
        self.db.commit()
        self.db.refresh(record)
        logger.info("[update_board] Updated %s board %s", self.kind.value, board_id)
        return record

    def delete_board(self, board_id: int) -> bool:
        record = self.get_board(board_id)
        if not record:
            logger.info("[delete_board] %s board %s not found", self.kind.value, board_id)
            return False

        self.db.delete(record)
        self.db.commit()
        logger.info("[delete_board] Deleted %s board %s", self.kind.value, board_id)
        return True
