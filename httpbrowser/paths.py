import os

from httpbrowser.constants import CONFIG_DIR_ENV


CONFIG_DIR = os.environ.get(CONFIG_DIR_ENV) or os.path.join(os.path.expanduser("~"), ".httpbrowser")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.json")
