"""Snapshot serialization for `libogame login --json`.

Keys are sorted and research is keyed by readable name, so two dumps of the
same account diff cleanly.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import EmpireSnapshot

STDOUT = Path("-")


def snapshot_to_json(snapshot: EmpireSnapshot) -> str:
    payload = snapshot.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_snapshot_json(*, snapshot: EmpireSnapshot, output_path: Path) -> Path:
    """Write `snapshot` to `output_path`, creating parent folders.

    The file is replaced in one step so an interrupted run never leaves half
    a document behind.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output_path.with_name(output_path.name + ".tmp")
    tmp_path.write_text(snapshot_to_json(snapshot), encoding="utf-8")
    tmp_path.replace(output_path)
    return output_path
