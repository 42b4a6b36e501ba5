# gridsnake/core/checkpointing.py
from __future__ import annotations
import json, os
from typing import Any, Dict, List, Protocol

SUFFIX = ".ckpt.json"

class Checkpointable(Protocol):
    """Objects that can round-trip their state as pure-Python/JSON-serializable dicts."""
    def get_state(self) -> Dict[str, Any]: ...
    def set_state(self, state: Dict[str, Any]) -> None: ...

class CheckpointManager:
    """
    Named JSON bundles of Checkpointable components under ``root_dir``.

    A save is written to a temp file and moved into place, so a crash mid-save
    keeps the previous bundle for that tag.
    """
    def __init__(self, root_dir: str):
        self.root_dir = root_dir

    def path_for(self, tag: str) -> str:
        if not tag or os.sep in tag or (os.altsep and os.altsep in tag):
            raise ValueError(f"invalid checkpoint tag: {tag!r}")
        return os.path.join(self.root_dir, tag + SUFFIX)

    def exists(self, tag: str) -> bool:
        return os.path.isfile(self.path_for(tag))

    def tags(self) -> List[str]:
        if not os.path.isdir(self.root_dir):
            return []
        return sorted(f[: -len(SUFFIX)] for f in os.listdir(self.root_dir) if f.endswith(SUFFIX))

    def save(self, tag: str, components: Dict[str, Checkpointable]) -> str:
        path = self.path_for(tag)
        bundle = {name: comp.get_state() for name, comp in components.items()}
        os.makedirs(self.root_dir, exist_ok=True)
        tmp = path + ".tmp"
        with open(tmp, "w") as f:
            json.dump(bundle, f)
        os.replace(tmp, path)
        return path

    def load(self, tag: str, components: Dict[str, Checkpointable]) -> List[str]:
        """Restores every component present in the bundle; returns their names.

        Raises FileNotFoundError for an unknown tag and ValueError for a file
        that is not a checkpoint bundle.
        """
        path = self.path_for(tag)
        with open(path, "r") as f:
            try:
                bundle = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"corrupt checkpoint {path}: {e}") from e
        if not isinstance(bundle, dict):
            raise ValueError(f"corrupt checkpoint {path}: expected an object")
        restored = []
        for name, comp in components.items():
            if name in bundle:
                comp.set_state(bundle[name])
                restored.append(name)
        return restored
