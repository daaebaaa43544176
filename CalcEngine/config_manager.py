# config_manager.py
import os
import copy
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

config_json = Path(os.getenv("CALC_ENGINE_CONFIG", Path(__file__).resolve().parent / "config.json"))


DEFAULT_SETTINGS = {
    "decimal_places": 6,
    "log_level": "WARNING",
    "symbol_replacements": {
        "×": "*",
        "÷": "/",
        "−": "-"
    }
}



def load_setting_value(key_value, path=None):
    """Return one setting, or every setting for key_value == "all".

    Missing or unreadable files fall back to DEFAULT_SETTINGS, missing keys per key.
    The result never shares objects with DEFAULT_SETTINGS.
    """
    settings_dict = copy.deepcopy(DEFAULT_SETTINGS)
    try:
        with open(path or config_json, 'r', encoding= 'utf-8') as f:
            loaded = json.load(f)

    except (FileNotFoundError, UnicodeDecodeError, json.JSONDecodeError) as e:
        if not isinstance(e, FileNotFoundError):
            logger.warning("Ignoring unreadable settings file %s: %s", path or config_json, e)
        loaded = {}

    if isinstance(loaded, dict):
        settings_dict.update(loaded)
    else:
        logger.warning("Ignoring settings file %s: top level is not an object", path or config_json)


    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_decimal_places(path=None):
    """Return the "decimal_places" setting as a non-negative int, or the default if it is not an int."""
    decimal_places = load_setting_value("decimal_places", path=path)
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
        logger.warning("Invalid decimal_places setting %r, using %d",
                       decimal_places, DEFAULT_SETTINGS["decimal_places"])
        return DEFAULT_SETTINGS["decimal_places"]
    return max(decimal_places, 0)




def save_setting(settings_dict, path=None):
    try:
        with open (path or config_json, 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4, ensure_ascii=False)
            return settings_dict

    except (FileNotFoundError, PermissionError):
        return{}
