"""Shared CSS styles for Task List components.

Reusable CSS for modals and buttons. All colors come from theme.py.

Usage
-----
    from tasklist.ui.base_styles import MODAL_BASE_CSS, BUTTON_BASE_CSS

    class MyModal(ModalScreen):
        DEFAULT_CSS = MODAL_BASE_CSS + BUTTON_BASE_CSS + '''
        MyModal > Container { width: 40; }
        '''
"""

from .theme import (
    BACKGROUND,
    FOREGROUND,
    BORDER,
    SELECTION,
    ACCENT_COLOR,
    SUCCESS_COLOR,
    CANCEL_COLOR,
    MODAL_OVERLAY_BG,
)


# Base Modal Styles
MODAL_BASE_CSS = f"""
/* Modal overlay - dark background behind modal */
ModalScreen {{
    align: center middle;
    background: {MODAL_OVERLAY_BG};
}}

/* Modal container - the actual modal box */
ModalScreen > Container {{
    background: {BACKGROUND};
    border: thick {ACCENT_COLOR};
    padding: 1 2;
}}

/* Modal header styling */
ModalScreen .modal-header {{
    color: {ACCENT_COLOR};
    border-bottom: solid {BORDER};
    text-style: bold;
    padding: 0 0 1 0;
}}
"""


# Base Button Styles
BUTTON_BASE_CSS = f"""
Button {{
    background: {SELECTION};
    color: {FOREGROUND};
    border: solid {BORDER};
    margin: 0 1;
    min-width: 12;
    height: 3;
}}

Button:hover {{
    background: {BORDER};
    border: solid {ACCENT_COLOR};
}}

/* Success variant (green) - save, confirm */
Button.success {{
    border: solid {SUCCESS_COLOR};
}}

Button.success:hover {{
    background: {SUCCESS_COLOR};
    color: {BACKGROUND};
}}

/* Error/Cancel variant (pink) - cancel, clear */
Button.error {{
    border: solid {CANCEL_COLOR};
}}

Button.error:hover {{
    background: {CANCEL_COLOR};
    color: {BACKGROUND};
}}
"""
