from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

MODULES_PATH = Path(__file__).parent.parent / "modules"


class ManifestError(ValueError):
    pass


def _mount_from(slug: str, raw: str | None) -> str:
    mount = raw if raw is not None else f"/{slug}"
    if not mount.startswith("/"):
        mount = "/" + mount
    if mount != "/" and mount.endswith("/"):
        mount = mount.rstrip("/")
    return mount


def _normalize_module(data: Dict[str, Any], *, path: Path) -> Dict[str, Any]:
    name = data.get("name")
    if not name:
        raise ManifestError(f"{path}: missing name")

    slug = data.get("slug") or name.replace("_", "-")
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": name,
            "slug": slug,
            "mount": _mount_from(slug, data.get("mount")),
            "public": bool(public),
            "path": path,
        }
    )
    return normalized


def load_manifest(module_dir: Path) -> Dict[str, Any]:
    manifest = module_dir / "module.yaml"
    try:
        with open(manifest, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ManifestError(f"{manifest}: invalid YAML ({exc})") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{manifest}: must be a mapping")
    return _normalize_module(data, path=module_dir)


def load_modules(modules_path: Path = MODULES_PATH) -> Dict[str, Dict[str, Any]]:
    modules: Dict[str, Dict[str, Any]] = {}
    if not modules_path.exists():
        return modules

    for module_dir in sorted(modules_path.iterdir()):
        if not module_dir.is_dir():
            continue
        if not (module_dir / "module.yaml").exists():
            continue
        normalized = load_manifest(module_dir)
        modules[normalized["name"]] = normalized
    return modules
