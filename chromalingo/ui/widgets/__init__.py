from chromalingo.ui.widgets.locale_picker import LocalePicker
from chromalingo.ui.widgets.theme_mode_picker import ThemeModePicker

__all__ = [
    "LocalePicker",
    "ThemeModePicker",
]
