import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Write `{relative path: text}` under `tmp_path / name`."""
    def _make(name: str, files: dict[str, str]) -> str:
        root = tmp_path / name
        root.mkdir()
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding='utf-8')
        return str(root)
    return _make
