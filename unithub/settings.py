from __future__ import annotations

from pathlib import Path

APP_TITLE = "Unit Converter"

HOST = "0.0.0.0"
PORT = 8080

ROOT_DIR = Path(__file__).resolve().parent.parent


def shared_templates_dir(root_dir: Path = ROOT_DIR) -> Path:
    return root_dir / "unithub" / "templates"
