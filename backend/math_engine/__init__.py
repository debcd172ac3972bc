"""
Jarvis math engine.

Deterministic trading math for the chat companion: position sizing,
prop-firm risk plans, compounding projections and exact percent answers.
"""

__version__ = "0.1.0"
