# core/session.py
from dataclasses import dataclass

LOGGED_OUT_CARD = -1

@dataclass
class PatronSession:
    """Which patron, if any, a client is logged in as."""
    name: str = ""
    card_num: int = LOGGED_OUT_CARD

    @property
    def logged_in(self) -> bool:
        return self.card_num != LOGGED_OUT_CARD

    def login(self, name: str, card_num: int) -> None:
        self.name = name
        self.card_num = card_num

    def clear(self) -> None:
        self.name = ""
        self.card_num = LOGGED_OUT_CARD
