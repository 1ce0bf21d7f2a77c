from .action import IReversibleAction
from .invoker import IActionInvoker

__all__ = [
    "IActionInvoker",
    "IReversibleAction",
]
