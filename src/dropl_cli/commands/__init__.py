from .list import list_files
from .login import login
from .upload import upload_files

__all__ = ["list_files", "login", "upload_files"]
