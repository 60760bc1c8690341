"""
MVVM Package - WPF-Style Data Binding for PySide6.

Provides:
- BindableProperty: Descriptor for auto-signaling properties.
- BindableBase: Base ViewModel with generic propertyChanged signal.
"""
from user_directory.ui.mvvm.bindable import BindableProperty, BindableBase

__all__ = [
    "BindableBase",
    "BindableProperty",
]
