import sys
import os

_tests_dir = os.path.dirname(os.path.abspath(__file__))
_src_dir   = os.path.abspath(os.path.join(_tests_dir, '..'))

# Prefer the source tree, so the tests run without 'pip install -e .'
sys.path.insert(0, _src_dir)
