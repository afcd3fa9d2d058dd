"""
paths/dirs for syndext scripts
"""

import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Mount point for stable storage.
STORAGE_DIR = os.path.join(BASE_DIR, 'storage')

# call check_dir (below) before using!
LOG_DIR = os.path.join(STORAGE_DIR, 'logs')


def check_dir(dir: str) -> None:
    """
    call before trying to create files in a directory
    """
    if not os.path.exists(dir):
        os.makedirs(dir, exist_ok=True)
