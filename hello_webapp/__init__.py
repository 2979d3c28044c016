"""Hello WebApp"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hello-webapp")
except PackageNotFoundError:
    __version__ = "dev"
