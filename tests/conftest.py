"""Fixtures that lay out a compiled project (sources, output, tsconfig)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

COMPONENT_JS = """\
Component({
    moduleId: module.id,
    selector: 'app-{name}',
    templateUrl: './{name}.html',
    styleUrls: ['./{name}.css']
})
"""


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """A project with tsconfig.json, src/ resources and matching dist/ output."""
    (tmp_path / "tsconfig.json").write_text(
        json.dumps({"compilerOptions": {"rootDir": "src", "outDir": "dist"}})
    )
    for name, folder in (("home", "app"), ("card", "app/shared")):
        src = tmp_path / "src" / folder
        out = tmp_path / "dist" / folder
        src.mkdir(parents=True, exist_ok=True)
        out.mkdir(parents=True, exist_ok=True)
        (src / f"{name}.html").write_text(f"<h1>\n  {name}\n</h1>\n")
        (src / f"{name}.css").write_text(f"h1 {{\n  content: \"{name}\";\n}}\n")
        (out / f"{name}.component.js").write_text(COMPONENT_JS.replace("{name}", name))
    (tmp_path / "dist" / "main.js").write_text("bootstrap();\n")
    return tmp_path
