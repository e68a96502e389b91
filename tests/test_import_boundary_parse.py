from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

_SRC = Path(__file__).parent.parent / "src"


def test_parse_import_does_not_load_html_stack() -> None:
    code = (
        "import sys; import parse; "
        "print(','.join(sorted(name for name in sys.modules "
        "if name == 'bs4' or name.startswith(('bs4.', 'artifacts')))))"
    )
    env = {**os.environ, "PYTHONPATH": str(_SRC)}

    completed = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )

    assert completed.stdout.strip() == ""
