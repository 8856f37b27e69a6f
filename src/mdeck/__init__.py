"""Present markdown documents as full-screen terminal slides."""

__version__ = "0.1.0"

app_name = "mdeck"
