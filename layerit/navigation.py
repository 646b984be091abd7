"""
View routing.

The app shows exactly one of five views at a time. The current view is a
single View value held in session state; user actions map to target views
through a fixed transition table.

Any action is accepted from any view. There are no automatic transitions:
the view only changes when the user presses a button.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class View(str, Enum):
    """The five screens of the app."""
    HOME = "home"
    QUIZ = "quiz"
    RESULTS = "results"
    PRODUCTS = "products"
    ROUTINE = "routine"


class NavigationAction(str, Enum):
    """User actions that move between views."""
    START_QUIZ = "start_quiz"
    COMPLETE_QUIZ = "complete_quiz"
    BROWSE_PRODUCTS = "browse_products"
    VIEW_ROUTINE = "view_routine"
    BACK_HOME = "back_home"


INITIAL_VIEW = View.HOME

TRANSITIONS = {
    NavigationAction.START_QUIZ: View.QUIZ,
    NavigationAction.COMPLETE_QUIZ: View.RESULTS,
    NavigationAction.BROWSE_PRODUCTS: View.PRODUCTS,
    NavigationAction.VIEW_ROUTINE: View.ROUTINE,
    NavigationAction.BACK_HOME: View.HOME,
}


def navigate(current: View, action: NavigationAction) -> View:
    """
    Resolve the view reached by an action.

    Args:
        current: View the action was triggered from. Every action is allowed
            from every view; current is only logged.
        action: Action the user took

    Returns:
        Target view for the action
    """
    action = NavigationAction(action)
    target = TRANSITIONS[action]
    logger.debug("Navigating %s -> %s on %s", parse_view(current).value, target.value, action.value)
    return target


def parse_view(value: str | View | None) -> View:
    """
    Coerce a stored value back into a View.

    Unknown or missing values fall back to the initial view.
    """
    if value is None:
        return INITIAL_VIEW
    try:
        return View(value)
    except ValueError:
        return INITIAL_VIEW
