from user_directory.ui.viewmodels.directory_viewmodel import DirectoryViewModel

__all__ = ["DirectoryViewModel"]
