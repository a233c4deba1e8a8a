# stackmachine/persistence/serializer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict

from stackmachine.core.errors import SerializationError
from stackmachine.core.state_machine import StateMachine

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def to_dict(machine: StateMachine) -> Dict[str, Any]:
    """
    Capture a machine's stack as a plain dictionary.

    :param machine: The machine to snapshot.
    :return: A mapping with ``format_version``, ``name`` and ``stack`` keys.
    """
    return {
        "format_version": FORMAT_VERSION,
        "name": machine.name,
        "stack": machine.get_stack(),
    }


def from_dict(data: Mapping[str, Any]) -> StateMachine:
    """
    Rebuild a machine from a snapshot produced by :func:`to_dict`.

    :param data: The snapshot mapping.
    :raises SerializationError: If the snapshot is malformed.
    """
    _SnapshotValidator().validate(data)
    machine = StateMachine.from_stack(data["stack"], name=data.get("name"))
    logger.debug("Restored %r from snapshot", machine)
    return machine


def dumps(machine: StateMachine, **json_kwargs: Any) -> str:
    """
    Serialize a machine to a JSON string.

    :param machine: The machine to serialize.
    :param json_kwargs: Extra keyword arguments passed to :func:`json.dumps`.
    :raises SerializationError: If a state is not JSON serializable.
    """
    try:
        return json.dumps(to_dict(machine), **json_kwargs)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not serialize state machine: {e}") from e


def loads(text: str) -> StateMachine:
    """
    Restore a machine from a JSON string produced by :func:`dumps`.

    :raises SerializationError: If the text is not valid JSON or not a valid snapshot.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not parse state machine snapshot: {e}") from e
    return from_dict(data)


class _SnapshotValidator:
    """
    Internal checks applied to a snapshot before a machine is rebuilt from it.
    """

    def validate(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            raise SerializationError(f"Snapshot must be a mapping, got {type(data).__name__}")

        version = data.get("format_version")
        if version != FORMAT_VERSION:
            raise SerializationError(f"Unsupported snapshot format version: {version!r}")

        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise SerializationError("Snapshot name must be a string or null")

        stack = data.get("stack")
        if not isinstance(stack, list):
            raise SerializationError("Snapshot stack must be a list")
        if not stack:
            raise SerializationError("Snapshot stack must not be empty")
