import pytest

import liquid


CONFIG = """
[System]
n_lateral = 4
fill_fraction = 0.35

[Run]
steps_per_particle = 1e2
target_ratio = 0.3
seed = 42
"""


def write(tmp_path, text):
    filename = tmp_path / "configure.ini"
    filename.write_text(text)
    return str(filename)


def test_load_config(tmp_path):
    conf = liquid.config.load_config(write(tmp_path, CONFIG))
    assert conf['n_lateral'] == 4
    assert conf['fill_fraction'] == 0.35
    assert conf['steps_per_particle'] == 100
    assert conf['target_ratio'] == 0.3
    assert conf['seed'] == 42
    assert conf['report_frequency'] == 1
    assert conf['dump_frequency'] == 0
    assert conf['rewrap'] == 'all'
    assert conf['minimum_image'] is False


def test_optional_seed(tmp_path):
    conf = liquid.config.load_config(
        write(tmp_path, CONFIG.replace("seed = 42", "minimum_image = yes"))
    )
    assert conf['seed'] is None
    assert conf['minimum_image'] is True


def test_invalid_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        liquid.config.load_config(str(tmp_path / "missing.ini"))
    for old, new in (
        ("n_lateral = 4", ""),
        ("n_lateral = 4", "n_lateral = 0"),
        ("fill_fraction = 0.35", "fill_fraction = 1.2"),
        ("target_ratio = 0.3", "target_ratio = 0"),
        ("seed = 42", "rewrap = some"),
        ("[System]", "[Sys]"),
    ):
        with pytest.raises(ValueError):
            liquid.config.load_config(write(tmp_path, CONFIG.replace(old, new)))


def test_shipped_config():
    import os
    filename = os.path.join(
        os.path.dirname(__file__), '..', 'script', 'thermalize', 'configure.ini'
    )
    conf = liquid.config.load_config(filename)
    system = liquid.new_system(conf['n_lateral'], conf['fill_fraction'])
    assert system.n == 512
