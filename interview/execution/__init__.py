"""
Execution Layer - Value Walkers

Defines the Builder and Displayer, the two directions of one traversal
protocol, and the ScopeStack that keeps their scope framing balanced.
"""

from interview.execution.builder import Builder
from interview.execution.displayer import Displayer
from interview.execution.scopes import ScopeStack


__all__ = [
    "Builder",
    "Displayer",
    "ScopeStack",
]
