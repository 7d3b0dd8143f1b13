# === config.py ===
import json
import os

DEFAULT_CONFIG_PATH = "data/advisor_config.json"

DEFAULT_CONFIG = {
    "default_filename": "ABCU_Advising_Program_Input.csv",
    "delimiter": ",",
}


def load_config(path=None):
    config = dict(DEFAULT_CONFIG)
    if not path or not os.path.exists(path):
        return config

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"⚠️ Warning: Could not read config {path} ({e}), using defaults")
        return config

    if not isinstance(data, dict):
        print(f"⚠️ Warning: Config {path} is not a JSON object, using defaults")
        return config

    filename = data.get("default_filename")
    if isinstance(filename, str) and filename.strip():
        config["default_filename"] = filename.strip()

    delimiter = data.get("delimiter")
    if delimiter is not None:
        if isinstance(delimiter, str) and len(delimiter) == 1:
            config["delimiter"] = delimiter
        else:
            print(f"⚠️ Warning: Ignoring delimiter {delimiter!r}, must be a single character")

    return config
