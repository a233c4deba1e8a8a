"""
Snapshot and restore of a state machine's stack.

Snapshots are plain dictionaries (``to_dict``/``from_dict``) or JSON text
(``dumps``/``loads``). States must be JSON serializable for the JSON forms.
"""

from .serializer import FORMAT_VERSION, dumps, from_dict, loads, to_dict

__all__ = ["FORMAT_VERSION", "dumps", "from_dict", "loads", "to_dict"]
