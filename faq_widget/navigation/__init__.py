"""
Navigation Layer - View State Machine

Defines the NavigationModel (open/close, drill-in, back, home, publish)
and the transition and error types it reports.
"""

from faq_widget.navigation.exceptions import InvalidSelection
from faq_widget.navigation.model import NavigationModel
from faq_widget.navigation.transitions import NavigationTransition

__all__ = [
    "InvalidSelection",
    "NavigationModel",
    "NavigationTransition",
]
