"""State I/O for saving and loading body sets."""

import json
from typing import Any, Dict, Optional, Tuple
from pathlib import Path
import numpy as np

from nbody_sim.physics.bodies import BodySet


def save_state(bodies: BodySet, output_path: str, metadata: Optional[Dict[str, Any]] = None):
    """Save a body set to file.

    Args:
        bodies: Body set to save
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary (scalars only for .npz)

    Raises:
        ValueError: If the suffix is not .npz or .json
    """
    output_path = Path(output_path)

    if output_path.suffix == '.npz':
        save_dict = {
            'positions': bodies.positions,
            'velocities': bodies.velocities,
            'masses': bodies.masses,
            'names': np.array(bodies.names, dtype=str),
        }
        if metadata:
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        state_dict = {
            'positions': bodies.positions.tolist(),
            'velocities': bodies.velocities.tolist(),
            'masses': bodies.masses.tolist(),
            'names': list(bodies.names),
            'metadata': metadata or {},
        }
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_state(input_path: str, validate: bool = True) -> Tuple[BodySet, Dict[str, Any]]:
    """Load a body set from file.

    By default the loaded state is validated like any other body set, so a
    file with a non-positive mass raises ConfigurationError. Pass
    ``validate=False`` to read back a snapshot of a run that diverged.

    Returns:
        Tuple of (bodies, metadata)
    """
    input_path = Path(input_path)
    build = BodySet if validate else BodySet.from_arrays_unchecked

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            names = [str(n) for n in data['names']] if 'names' in data.files else None
            bodies = build(data['positions'], data['velocities'], data['masses'], names=names)
            metadata = {
                key[len('metadata_'):]: data[key].item()
                for key in data.files
                if key.startswith('metadata_')
            }
        return bodies, metadata

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)
        bodies = build(
            state_dict['positions'],
            state_dict['velocities'],
            state_dict['masses'],
            names=state_dict.get('names'),
        )
        return bodies, state_dict.get('metadata', {})

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")
