"""
Viewer Theme Stylesheet

Dark stylesheet for the volume viewer. Rendered images are shown on a
black background, so the surrounding chrome stays dark and low contrast.
"""

# Viewer color palette
COLORS = {
    "background": "#1E1F22",
    "surface": "#2B2D31",
    "border": "#3C3F45",
    "text": "#E6E6E6",
    "text_secondary": "#A0A4AB",
    "text_disabled": "#6B6F76",
    "accent": "#4C8BF5",
    "accent_hover": "#6A9FF7",
    "accent_pressed": "#2F6FD8",
    "error": "#E5534B",
}

FONTS = {
    "family": "Segoe UI, Roboto, Helvetica Neue, Arial, sans-serif",
    "size": "10pt",
    "size_header": "12pt",
}


def get_stylesheet() -> str:
    """Build the Qt stylesheet for the viewer theme."""
    return f"""
    QWidget {{
        background-color: {COLORS["background"]};
        color: {COLORS["text"]};
        font-family: {FONTS["family"]};
        font-size: {FONTS["size"]};
    }}

    QMenuBar, QMenu, QStatusBar {{
        background-color: {COLORS["surface"]};
        border: none;
    }}

    QMenu::item:selected, QMenuBar::item:selected {{
        background-color: {COLORS["accent"]};
    }}

    QGroupBox {{
        border: 1px solid {COLORS["border"]};
        border-radius: 4px;
        margin-top: 12px;
        padding-top: 8px;
        font-size: {FONTS["size_header"]};
    }}

    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        color: {COLORS["text_secondary"]};
    }}

    QPushButton {{
        background-color: {COLORS["accent"]};
        color: white;
        border: none;
        border-radius: 4px;
        padding: 6px 14px;
        min-width: 70px;
    }}

    QPushButton:hover {{
        background-color: {COLORS["accent_hover"]};
    }}

    QPushButton:pressed {{
        background-color: {COLORS["accent_pressed"]};
    }}

    QPushButton#secondaryButton {{
        background-color: transparent;
        color: {COLORS["accent"]};
        border: 1px solid {COLORS["accent"]};
    }}

    QSpinBox, QComboBox {{
        background-color: {COLORS["surface"]};
        border: 1px solid {COLORS["border"]};
        border-radius: 4px;
        padding: 3px 6px;
    }}

    QSlider::groove:horizontal {{
        height: 4px;
        background: {COLORS["border"]};
        border-radius: 2px;
    }}

    QSlider::handle:horizontal {{
        background: {COLORS["accent"]};
        width: 14px;
        margin: -5px 0;
        border-radius: 7px;
    }}

    QProgressBar {{
        border: 1px solid {COLORS["border"]};
        border-radius: 4px;
        text-align: center;
    }}

    QProgressBar::chunk {{
        background-color: {COLORS["accent"]};
    }}
    """


class ViewerStyle:
    """Helper class for applying the viewer theme."""

    @staticmethod
    def apply(app) -> None:
        app.setStyleSheet(get_stylesheet())
