import logging.config
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML


def setup_logging(path: Optional[str] = None, level: int = logging.WARNING) -> None:
    if path and Path(path).exists():
        with open(path, 'r') as file:
            config_dict = YAML(typ='safe').load(file)
        logging.config.dictConfig(config_dict)
    else:
        logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
