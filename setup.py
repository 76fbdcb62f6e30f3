"""Setup for ArcTimer.

Install for development:
    pip install -e .[test]

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "ArcTimer",
        "CFBundleDisplayName": "ArcTimer",
        "CFBundleIdentifier": "com.arctimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="ArcTimer",
    version="0.1.0",
    packages=find_packages(include=["arctimer", "arctimer.*"]),
    python_requires=">=3.10",
    install_requires=["PyQt6>=6.2"],
    extras_require={"test": ["pytest"]},
    entry_points={"gui_scripts": ["arctimer = arctimer.__main__:main"]},
    **py2app_kwargs,
)
