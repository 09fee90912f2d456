import logging
import os

import requests

logger = logging.getLogger(__name__)


def download_file(url, dest, headers=None, timeout=60):
    """Download a file from a URL to a destination path, with optional headers."""
    if os.path.exists(dest):
        logger.info(f"{dest} already exists. Skipping download.")
        return dest
    os.makedirs(os.path.dirname(dest) or ".", exist_ok=True)
    logger.info(f"Downloading from {url} ...")
    r = requests.get(url, headers=headers, timeout=timeout)
    r.raise_for_status()
    tmp = f"{dest}.tmp"
    with open(tmp, "wb") as f:
        f.write(r.content)
    os.replace(tmp, dest)
    logger.info(f"Downloaded to {dest}")
    return dest
