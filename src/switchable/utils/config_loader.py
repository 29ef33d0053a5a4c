import logging
from typing import Dict, List

import yaml

from switchable.models.config_models import SplitConfig
from switchable.services.splitter import Splitter

logger = logging.getLogger(__name__)


def load_split_config(path) -> SplitConfig:
    with open(path) as f:
        data = yaml.safe_load(f)
    logger.debug("Loaded split config from %s", path)
    return SplitConfig.model_validate(data)


def load_split_configs(path) -> List[SplitConfig]:
    with open(path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict) or "splits" not in data:
        raise ValueError(f"{path}: expected a mapping with a 'splits' list")
    logger.debug("Loaded %d split configs from %s", len(data["splits"] or []), path)
    return [SplitConfig.model_validate(split) for split in data["splits"] or []]


def build_splitters(path, rng=None) -> Dict[str, Splitter]:
    """Build one Splitter per split defined in a multi-split YAML file, keyed by split name."""
    splitters = {}
    for config in load_split_configs(path):
        if config.name in splitters:
            raise ValueError(f"Duplicate split name: {config.name}")
        splitters[config.name] = Splitter(config.items, rng=rng)
    return splitters
