from ui.widgets.session_dialog import SessionDialog

__all__ = ["SessionDialog"]
