import os
from pathlib import Path

import pytest

# Disable API token auth for tests (individual tests re-enable it via monkeypatch)
os.environ["MINDMAP_NO_AUTH"] = "true"
# Disable rate limiting for tests
os.environ["MINDMAP_NO_RATE_LIMIT"] = "true"
# Cross-origin callers must be listed explicitly
os.environ["CORS_ORIGINS"] = "http://mindmap.test"


SAMPLE_OUTLINE = """@startmindmap
* Languages
** Python
*** Django
*** FastAPI
** Rust
* Tools
@endmindmap
"""


@pytest.fixture
def mindmap_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A base directory holding a sample mindmap, wired in via MINDMAP_BASE_DIR."""
    base = tmp_path / "mindmaps"
    base.mkdir()
    (base / "mindmap.puml").write_text(SAMPLE_OUTLINE, encoding="utf-8")
    monkeypatch.setenv("MINDMAP_BASE_DIR", str(base))
    return base
