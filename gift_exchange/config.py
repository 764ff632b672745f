import json
import logging
import os
import sys
from typing import Optional

CONFIG_DIR = os.path.normpath(os.path.join(os.path.dirname(__file__), "..", "config"))
CONFIG_FNAME = os.path.join(CONFIG_DIR, "config.json")

DEFAULT_SITE_URL = "https://example.org/gift-exchange/reveal"
DEFAULT_CONFIG = {
    "site_url": DEFAULT_SITE_URL,
    "assignment_cycles": 1,
    "token_style": "link",
    "message_template": None,
}


def read_config(fname: str) -> dict:
    try:
        with open(fname) as fp:
            return json.load(fp)
    except Exception:
        logging.critical("Failed to read config file %s", fname)
        sys.exit(1)


def load_config(fname: Optional[str] = None) -> dict:
    """Read the config file over the defaults. Without a filename, use the config dir's file if present."""
    config = dict(DEFAULT_CONFIG)
    if fname is None:
        if not os.path.exists(CONFIG_FNAME):
            logging.debug("No config file at %s, using defaults", CONFIG_FNAME)
            return config
        fname = CONFIG_FNAME
    o = read_config(fname)
    assert isinstance(o, dict), "config must be a JSON object"
    config.update(o)
    return config
