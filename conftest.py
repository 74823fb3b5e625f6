# Ensure `import pbrforge` works from a fresh clone without prior install.
import sys
from pathlib import Path

_PKG_DIR = Path(__file__).resolve().parent / "python"
if str(_PKG_DIR) not in sys.path:
    sys.path.insert(0, str(_PKG_DIR))


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: slow tests (full-resolution synthesis)")
