from enum import Enum


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class CashMode(str, Enum):
    NONE = "NONE"
    ABSOLUTE = "ABSOLUTE"
    RELATIVE = "RELATIVE"


class LogKind(str, Enum):
    NARRATIVE = "narrative"
    CHOICE = "choice"
    EFFECT = "effect"


class SoundCue(str, Enum):
    CLICK = "click"
    BUY = "buy"
    SELL = "sell"
    WIN = "win"
    LOSS = "loss"
    CORRECT = "correct"
    WRONG = "wrong"
