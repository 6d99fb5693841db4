# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""File I/O utilities for loading YAML crossing jobs and exporting JSON results."""

import json
import yaml
from pathlib import Path
from datetime import datetime
from .crossing import Crossing


def load_crossing_job(yaml_path):
    """
    Load a crossing job from a YAML file.

    Parameters
    ----------
    yaml_path : str
        Path to the YAML configuration file.

    Returns
    -------
    Crossing
        Unsolved crossing built from the configuration.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError("Configuration must be a mapping")

    required_keys = ['segment_a', 'segment_b']
    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required key in YAML: '{key}'")

        segment = config[key]
        if not isinstance(segment, dict) or 'start' not in segment or 'end' not in segment:
            raise ValueError(f"Segment '{key}' missing 'start' or 'end'")

    return Crossing(config)


def export_to_json(crossing, output_path, metadata=None):
    """
    Export a solved crossing to a JSON file.

    Parameters
    ----------
    crossing : Crossing
        Crossing to export. It must be solved before export.
    output_path : str
        Path where the JSON file will be written.
    metadata : dict, optional
        Optional metadata to include in the output file.

    Raises
    ------
    RuntimeError
        If the crossing has not been solved yet.

    """
    output_path = Path(output_path)

    if not crossing.is_solved:
        raise RuntimeError("Crossing has not been solved yet - cannot export")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'metadata': {
            'generated_at': datetime.now().isoformat(),
            'intersects': crossing.intersects,
        },
        'crossing': crossing.to_dict()
    }

    if metadata:
        data['metadata'].update(metadata)

    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)


def auto_generate_output_path(input_path):
    """
    Generate an output path with a timestamp in the working directory.

    The output directory will be <current directory>/generated/.
    """
    input_path = Path(input_path)
    job_name = input_path.stem
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    output_dir = Path.cwd() / "generated"
    output_dir.mkdir(parents=True, exist_ok=True)

    output_filename = f"{job_name}_{timestamp}.json"
    return output_dir / output_filename
