"""Load and save carrier parameter sets as JSON files."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .dsp.errors import InvalidConfiguration
from .dsp.params import CarrierParams

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_params(path: PathLike) -> CarrierParams:
    """Read a flat JSON parameter record from ``path``.

    Keys follow :meth:`CarrierParams.from_mapping`; anything missing keeps
    its default. The returned params have been validated.
    """
    path = Path(path)
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidConfiguration(str(path), f"malformed JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidConfiguration(str(path), "expected a JSON object at the top level")
    params = CarrierParams.from_mapping(data).validate()
    logger.info("Loaded carrier parameters from %s", path)
    return params


def save_params(params: CarrierParams, path: PathLike) -> None:
    """Write ``params`` to ``path`` as an indented flat JSON record."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(params.to_mapping(), f, indent=2)
    logger.info("Saved carrier parameters to %s", path)
