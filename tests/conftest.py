"""
Pytest configuration for Monkey tests.
"""
import os
import sys

import pytest

# Make `import monkey` work without installing the package
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')
_TESTS_DIR = os.path.dirname(os.path.abspath(__file__))

for _p in (_SRC_DIR, _TESTS_DIR):
	if _p not in sys.path:
		sys.path.insert(0, _p)


@pytest.fixture(autouse=True)
def _reset_config():
	"""Keep config mutations (e.g. `--debug`) from leaking between tests."""
	from monkey.config import config
	saved = config.as_dict()
	yield
	config.update(**saved)
