"""cluesat/api: Notepad projection and game trace replay."""

from cluesat.api.notepad import Notepad
from cluesat.api.trace import GameTrace

__all__ = ["Notepad", "GameTrace"]
