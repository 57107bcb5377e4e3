"""Bundled static asset access"""

from pathlib import Path
from typing import BinaryIO, Callable, Union

AssetResolver = Callable[[str], BinaryIO]


def package_assets(directory: Union[str, Path]) -> AssetResolver:
    """
    Build a resolver over a directory of bundled files.

    Args:
        directory: Directory holding the assets

    Returns:
        Callable opening an asset by name for binary reading.
        Missing assets raise FileNotFoundError.
    """
    root = Path(directory)

    def open_asset(name: str) -> BinaryIO:
        return open(root / name, "rb")

    return open_asset
