"""Drive Gallery - view the images of a public Google Drive folder tree."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("drivegallery")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"
