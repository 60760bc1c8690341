"""
User Directory UI.

- cardview: filtering, render tree and card widgets
- state: DirectoryState and its reactions
- viewmodels: DirectoryViewModel
- theme: ThemeController
- main_window: MainWindow (imported directly, needs a QApplication)
"""
