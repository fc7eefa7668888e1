"""Find and replace logic for text editors: editor model, form, dialogs and settings."""

__version__ = "0.1.0"
__all__ = ["document", "settings", "form", "dialog"]