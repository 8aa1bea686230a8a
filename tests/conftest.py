import pytest
from isoprism import prism, group, Shader


@pytest.fixture
def unit_cube():
    return group(prism((0, 0, 0), 1))


@pytest.fixture
def default_shader():
    return Shader(x="#00000026", y="#00000066")


@pytest.fixture
def scene_file(tmp_path):
    """Writes a YAML scene file and returns its path."""
    def _writer(text: str, name: str = "scene.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _writer
