# models/board_record.py
from sqlalchemy import BigInteger, Column, Integer, String


class BoardRecordMixin:
    """Columns shared by every persisted board: an id and an opaque board string.

    The board string is stored exactly as given. ``id`` stays ``None`` until
    it is set by the caller or assigned when the record is stored.
    """

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    board = Column(String, nullable=True)

    def __init__(self, id=None, board=None):
        self.id = id
        self.board = board

    def to_dict(self):
        return {
            "id": self.id,
            "board": self.board
        }

    def __repr__(self):
        return f"<{type(self).__name__}(id={self.id}, board={self.board!r})>"
