"""
Transition Types - Navigation State Machine

Describes what a NavigationModel operation did to the view pointer. Callers
use it to decide whether anything visible changed.
"""

from enum import Enum, auto


class NavigationTransition(Enum):
    HOLD = auto()  # The view pointer did not move.
    PUSH = auto()  # The previous view was pushed onto history (drill-in).
    POP = auto()  # A view was popped from history (back).
    RESET = auto()  # History cleared, pointer back on Welcome (open/close/home/reload).
