from pathlib import Path

import pytest

TEXTS = {
    "a.txt": "The cat sat on the mat\nthe END\n",
    "b.txt": "  THE dog\tate the cat  \n\n",
    "c.txt": "Mat mat MAT dog\n",
}


@pytest.fixture
def text_files(tmp_path: Path) -> list[str]:
    paths = []
    for name, text in TEXTS.items():
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        paths.append(str(path))

    return paths
