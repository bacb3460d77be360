import pytest

from tests.fakes import FakeSite


@pytest.fixture
def make_site():
    return FakeSite


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[search]\nzip = "60601"\ndistance = 50\n', encoding="utf-8")
    return path
