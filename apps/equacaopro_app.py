"""Streamlit entrypoint for the EquaçãoPro diagnostic.

Run with ``streamlit run apps/equacaopro_app.py``.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from ui.streamlit.diagnostic.app import main  # noqa: E402

main()
