from database import Base
from .board_record import BoardRecordMixin


class ScrabbleBoard(BoardRecordMixin, Base):
    __tablename__ = "scrabble_board"
