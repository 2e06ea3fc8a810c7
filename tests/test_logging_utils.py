import io
import re

import pytest

from run_image.logging_utils import debug_log, open_debug_log


def test_debug_log_disabled_is_noop():
    """Test that logging with no file does nothing."""
    debug_log(None, "ignored")


def test_debug_log_writes_timestamped_line():
    """Test the timestamped line format."""
    buf = io.StringIO()
    debug_log(buf, "hello")
    assert re.fullmatch(r"\[\d+\.\d{6}\] hello\n", buf.getvalue())


def test_debug_log_ignores_closed_file():
    """Test that writing to a closed file is ignored."""
    buf = io.StringIO()
    buf.close()
    debug_log(buf, "late message")


def test_open_debug_log(tmp_path):
    """Test opening the debug log and the disabled case."""
    assert open_debug_log(None) is None
    path = tmp_path / "debug.log"
    with open_debug_log(str(path)) as f:
        debug_log(f, "first")
    assert path.read_text().endswith("first\n")


def test_open_debug_log_unwritable_path_exits(tmp_path, capsys):
    """Test that an unopenable debug file exits with status 1."""
    with pytest.raises(SystemExit) as excinfo:
        open_debug_log(str(tmp_path))
    assert excinfo.value.code == 1
    assert "Could not open debug file" in capsys.readouterr().err
