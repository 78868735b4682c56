"""confform - Render comment-annotated config files as editable HTML forms."""

__version__ = "0.3.0"
