"""WinTuner — Windows 11 Tweaks & Essential Apps"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("wintuner")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "WinTuner"
