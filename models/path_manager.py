import os
from pathlib import Path
import platform
from typing import Dict, Optional

from appdirs import user_data_dir

from utils.logger import APP_NAME
from .bookmark import BrowserType
from .errors import InputError

BOOKMARK_FILE_ENV = "BOOKMARK_FILE"
URLS_FILE_NAME = "urls_v0.1.json"
URLS_V0_0_X_FILE_PATH = ".bookmark-cli/urls.json"

class PathManager:
    """Resolves the registry file and platform-specific browser bookmark paths"""

    def __init__(self, system: Optional[str] = None, home: Optional[Path] = None):
        self._system = (system or platform.system()).lower()
        self._home = home or Path.home()

        # Chromium-family browsers keep bookmarks in <base>/Default/Bookmarks
        self._base_paths: Dict[str, Dict[BrowserType, Path]] = {
            'darwin': {
                BrowserType.BRAVE: self._home / 'Library/Application Support/BraveSoftware/Brave-Browser',
                BrowserType.CHROME: self._home / 'Library/Application Support/Google/Chrome',
                BrowserType.CHROMIUM: self._home / 'Library/Application Support/Chromium',
                BrowserType.EDGE: self._home / 'Library/Application Support/Microsoft Edge',
                BrowserType.VIVALDI: self._home / 'Library/Application Support/Vivaldi',
            },
            'windows': {
                BrowserType.BRAVE: self._home / 'AppData/Local/BraveSoftware/Brave-Browser/User Data',
                BrowserType.CHROME: self._home / 'AppData/Local/Google/Chrome/User Data',
                BrowserType.CHROMIUM: self._home / 'AppData/Local/Chromium/User Data',
                BrowserType.EDGE: self._home / 'AppData/Local/Microsoft/Edge/User Data',
                BrowserType.VIVALDI: self._home / 'AppData/Local/Vivaldi/User Data',
            },
            'linux': {
                BrowserType.BRAVE: self._home / '.config/BraveSoftware/Brave-Browser',
                BrowserType.CHROME: self._home / '.config/google-chrome',
                BrowserType.CHROMIUM: self._home / '.config/chromium',
                BrowserType.EDGE: self._home / '.config/microsoft-edge',
                BrowserType.VIVALDI: self._home / '.config/vivaldi',
            },
        }

    def registry_file(self, file_flag: Optional[str] = None) -> Path:
        """
        Path of the bookmarks registry: the --file flag, then the BOOKMARK_FILE
        environment variable, then the user data directory.
        """
        if file_flag:
            return Path(file_flag).expanduser()
        from_env = os.environ.get(BOOKMARK_FILE_ENV)
        if from_env:
            return Path(from_env).expanduser()
        return Path(user_data_dir(APP_NAME)) / URLS_FILE_NAME

    def legacy_registry_file(self) -> Path:
        """Default location of the v0.0.x registry"""
        return self._home / URLS_V0_0_X_FILE_PATH

    def get_bookmark_path(self, browser: BrowserType) -> Path:
        """Default bookmarks file of the browser's Default profile"""
        base_path = self._base_paths.get(self._system, {}).get(browser)
        if base_path is None:
            raise InputError(f"browser {browser.value} is not supported on {self._system}")
        return base_path / 'Default' / 'Bookmarks'
