from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

ABIS_DIR = Path(__file__).parent / "abis"

UI_POOL_DATA_PROVIDER_ABI_PATH = ABIS_DIR / "UiPoolDataProviderV3.json"


def load_abi(path: str | Path) -> list[dict]:
    """Load an ABI from a JSON file and return its "abi" field.

    Args:
        path: Path to the JSON file containing an "abi" field.

    Returns:
        ABI as a list of dictionaries.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        KeyError: If the JSON does not contain an "abi" field.
    """
    p = Path(path)
    with p.open() as f:
        data = json.load(f)
    return data["abi"]


@lru_cache(maxsize=None)
def load_ui_pool_data_provider_abi() -> list[dict]:
    """Load the Aave V3 UiPoolDataProvider ABI."""
    return load_abi(UI_POOL_DATA_PROVIDER_ABI_PATH)


def output_component_names(
    abi: list[dict], function_name: str, output_index: int = 0
) -> list[str]:
    """Return the struct field names of a function output.

    Raises:
        KeyError: If the function or output is not a struct in the ABI.
    """
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            components = entry["outputs"][output_index]["components"]
            return [component["name"] for component in components]
    raise KeyError(f"Function '{function_name}' not found in ABI")


def struct_to_dict(values: Sequence[Any], names: list[str]) -> dict[str, Any]:
    """Pair a decoded struct tuple with its field names."""
    values = tuple(values)
    if len(values) != len(names):
        raise ValueError(
            f"Struct has {len(values)} fields but ABI declares {len(names)}"
        )
    return dict(zip(names, values))
