import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class KeySequence:
    name: str
    keys: list[Any]


def get_key_sequences(json_data_from_file: dict) -> list[KeySequence]:
    if not isinstance(json_data_from_file, dict):
        raise ValueError("Config must be a JSON object")
    trees = json_data_from_file.get("trees")
    if not isinstance(trees, list):
        raise ValueError('Config needs a "trees" list')

    key_sequences = []
    seen_names = set()
    for i, entry in enumerate(trees):
        if not isinstance(entry, dict):
            raise ValueError(f"trees[{i}] must be an object, got {type(entry).__name__}")

        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f'trees[{i}] needs a non-empty string "name"')
        if name in seen_names:
            raise ValueError(f"trees[{i}] reuses the name {name!r}")
        seen_names.add(name)

        keys = entry.get("keys")
        if not isinstance(keys, list):
            raise ValueError(f'trees[{i}] ({name}) needs a "keys" list')

        key_sequences.append(KeySequence(name=name, keys=keys))
    return key_sequences


TREE_CONFIG_FILE = "tree_config.json"


def get_key_sequences_from_config(config_path: Path | None = None) -> list[KeySequence]:
    if config_path is None:
        config_path = Path(__file__).parent / ".." / ".." / TREE_CONFIG_FILE
    with open(config_path, "r") as file:
        json_data_from_file = json.load(file)
    return get_key_sequences(json_data_from_file)
