from database import Base
from .board_record import BoardRecordMixin


class WordPlayBoard(BoardRecordMixin, Base):
    __tablename__ = "word_play_board"
