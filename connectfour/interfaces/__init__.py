"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the text adapters around the engine: input parsing,
prompts and board rendering for the terminal.
"""

# Don't import anything here to avoid circular imports
__all__ = []
