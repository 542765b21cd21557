from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    SPAN = auto()
    ENTITY = auto()
    ERROR = auto()
    PI = auto()
    COMMENT = auto()
    DECL = auto()
    DECL_END = auto()
    ELEMENT = auto()
    ELEMENT_END = auto()
