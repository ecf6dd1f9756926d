from enum import Enum

class BoardKind(str, Enum):
    SCRABBLE = "scrabble"
    WORD_PLAY = "wordplay"
