"""gts: publish semantic-version git tags (vX, vX.Y, vX.Y.Z) from CI."""

__version__ = "0.1.0"
