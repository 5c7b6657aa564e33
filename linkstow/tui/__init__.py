from linkstow.tui.renderers import StowConsoleUI

__all__ = ["StowConsoleUI"]
