"""Front-end layer: pure-Python view models and the PySide6 widgets bound to them."""
