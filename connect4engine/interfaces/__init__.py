"""
connect4engine.interfaces - User interfaces for Connect Four

These drive the engine through GameController only.
"""

# Don't import anything here to avoid circular imports
__all__ = []
