import datetime
from pathlib import Path
from enum import StrEnum
from decimal import Decimal

import yaml


# HACK: need to add this to yaml so that StrEnum can be dumped to yaml
yaml.SafeDumper.add_multi_representer(
    StrEnum,
    yaml.representer.SafeRepresenter.represent_str,
)
yaml.SafeDumper.add_multi_representer(
    Decimal,
    lambda dumper, data: dumper.represent_str(str(data))
)
yaml.SafeDumper.add_multi_representer(
    Path,
    lambda dumper, data: dumper.represent_str(str(data))
)


def load_yaml_file(file_path: str | Path) -> dict | list[dict]:
    with open(file_path, 'r') as f:
        # NOTE: safe_load_all returns a generator, one item per document
        contents = list(yaml.safe_load_all(f))
        if not contents:
            return {}
        elif len(contents) == 1:
            return contents[0] or {}
        else:
            return contents


def dump_yaml_file(file_path: str | Path, content: dict | list[dict]):
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w') as f:
        if isinstance(content, list):
            yaml.safe_dump_all(content, f, default_flow_style=False, sort_keys=False)
        else:
            yaml.safe_dump(content, f, default_flow_style=False, sort_keys=False)


def get_iso_timestamp(dt: datetime.datetime | None=None) -> str:
    '''Returns UTC time in ISO 8601 format with milliseconds, e.g. 2018-10-12T07:32:56.512Z'''
    dt = dt or datetime.datetime.now(tz=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
